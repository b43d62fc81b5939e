"""Sample data and fixtures."""

from data.sample_building import SAMPLE_SAVE, create_sample_building, load_sample_buildings

__all__ = ["SAMPLE_SAVE", "create_sample_building", "load_sample_buildings"]
