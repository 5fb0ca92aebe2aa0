"""City generation package: rasterization, roads, green spaces, buildings and their orchestration."""
