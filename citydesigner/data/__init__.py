"""Packaged data files, such as the sample city layout."""
