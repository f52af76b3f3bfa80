# runningfix/fix_finder/visualization.py
"""
Interactive Folium map of bearing rays and the fixes where they cross.
Each concern gets its own toggleable layer.
"""
import logging
from typing import Optional

import folium

from ..geometry.core import destination_point
from .config import FixFinderConfig
from .data_models import FixReport, PairResult


class FixMapVisualizer:
    """Creates Folium maps from a FixReport."""

    def __init__(self, config: Optional[FixFinderConfig] = None):
        self.config = config or FixFinderConfig()

    def create_fix_map(self, report: FixReport) -> folium.Map:
        centroid = report.centroid()
        if centroid is not None:
            map_center = [centroid.latitude, centroid.longitude]
        elif report.rays:
            map_center = [
                sum(r.latitude for r in report.rays) / len(report.rays),
                sum(r.longitude for r in report.rays) / len(report.rays)
            ]
        else:
            map_center = [0.0, 0.0]
        fix_map = folium.Map(location=map_center, zoom_start=self.config.map_zoom_start, tiles="CartoDB positron")

        rays_group = folium.FeatureGroup(name="Bearing Rays", show=True).add_to(fix_map)
        for i, ray in enumerate(report.rays):
            folium.Marker(
                location=[ray.latitude, ray.longitude],
                popup=f"<b>Observation #{i}</b><br>Bearing: {ray.bearing:.1f}°<br>Declination: {ray.declination:+.1f}°",
                tooltip=f"Observation #{i}",
                icon=folium.Icon(color='blue', icon='eye-open')
            ).add_to(rays_group)
            end = destination_point(ray, ray.true_bearing, self.config.ray_length_km)
            folium.PolyLine(
                locations=[[ray.latitude, ray.longitude], [end.latitude, end.longitude]],
                color='blue', weight=2, opacity=0.7,
                tooltip=f"True bearing {ray.true_bearing_normalized:.1f}°"
            ).add_to(rays_group)

        fixes_group = folium.FeatureGroup(name="Pairwise Fixes", show=True).add_to(fix_map)
        for result in report.pair_results:
            if result.success:
                self._create_fix_marker(result).add_to(fixes_group)

        if centroid is not None:
            folium.Marker(
                location=[centroid.latitude, centroid.longitude],
                popup=f"<b>Mean Fix</b><br>{centroid}",
                tooltip="Mean Fix",
                icon=folium.Icon(color='green', icon='screenshot')
            ).add_to(fix_map)

        folium.LayerControl(collapsed=False).add_to(fix_map)
        logging.info(f"Fix map created with {len(report.rays)} rays and {report.fixes_found} fixes.")
        return fix_map

    def _create_fix_marker(self, result: PairResult) -> folium.CircleMarker:
        fix = result.fix
        return folium.CircleMarker(
            location=[fix.latitude, fix.longitude],
            radius=6, color='darkred', fill=True, fill_color='red', fill_opacity=0.8,
            popup=f"<b>Fix {result.first_index} x {result.second_index}</b><br>{fix}",
            tooltip=f"Fix {result.first_index} x {result.second_index}"
        )
