"""
Airport Traffic Map
Package for cleaning Chilean domestic airport operations and rendering the
2020 traffic reduction as a coloured point map over the country outline.
"""

__version__ = "1.0.0"
__author__ = "Virginia Di Mauro"

# Lazy imports to avoid long startup times (geopandas, folium, matplotlib)
# Import as needed in code

__all__ = [
    "config",
    "io",
    "colors",
    "coordinates",
    "cleaning",
    "spatial",
    "layout",
    "interaction",
    "render",
    "qc",
]
