"""City preview module for rendering a layout to a top-down 2D image.

Roads are drawn through their rasterized points, parks and the fountain as
filled circles, buildings as footprints colored by type.
"""
import os
from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw

from citydesigner.citygen.dataclass import BuildingType, CityLayout
from citydesigner.utils.logger import Logger

TYPE_COLOR_KEYS = {
    BuildingType.LOW_RISE: 'low_rise',
    BuildingType.MID_RISE: 'mid_rise',
    BuildingType.HIGH_RISE: 'high_rise',
}


def _color(config, name: str) -> Tuple[int, int, int]:
    return tuple(int(c) for c in config[f'render.colors.{name}'])


def render_layout(layout: CityLayout, config, width: int, height: int) -> Image.Image:
    """Render a layout to an RGB image of the screen size.

    Args:
        layout: The layout to draw.
        config: Configuration with the ``render`` colors and point size.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        The rendered image.
    """
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    canvas[:, :] = _color(config, 'background')
    image = Image.fromarray(canvas)
    draw = ImageDraw.Draw(image)

    road_color = _color(config, 'road')
    for road in layout.roads:
        half = max(1, road.width // 2)
        if len(road.points) > 1:
            draw.line([(p.x, p.y) for p in road.points], fill=road_color, width=road.width)
        else:
            p = road.points[0]
            draw.rectangle([p.x - half, p.y - half, p.x + half, p.y + half], fill=road_color)

    park_color = _color(config, 'park')
    for park in layout.parks:
        _draw_circle(draw, park, park_color)

    if layout.fountain is not None:
        _draw_circle(draw, layout.fountain, _color(config, 'fountain'))

    point_size = config['render.point_size']
    for building in layout.buildings:
        bounds = building.bounds
        color = _color(config, TYPE_COLOR_KEYS[building.building_type])
        draw.rectangle([bounds.left, bounds.top, bounds.right, bounds.bottom], fill=color)
        draw.rectangle([building.x - point_size, building.y - point_size,
                        building.x + point_size, building.y + point_size], fill=(0, 0, 0))

    return image


def _draw_circle(draw: ImageDraw.ImageDraw, region, color):
    if not region.points:
        return
    draw.ellipse([region.center_x - region.radius, region.center_y - region.radius,
                  region.center_x + region.radius, region.center_y + region.radius], fill=color)


def save_preview(layout: CityLayout, config, width: int, height: int, file_path: str) -> str:
    """Render a layout and write it as an image file.

    Args:
        layout: The layout to draw.
        config: Configuration with the ``render`` settings.
        width: Image width in pixels.
        height: Image height in pixels.
        file_path: Destination, the format follows the extension.

    Returns:
        The written path.
    """
    output_dir = os.path.dirname(file_path)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)
    render_layout(layout, config, width, height).save(file_path)
    Logger.get_logger('Preview').info(f'Preview saved to {file_path}')
    return file_path
