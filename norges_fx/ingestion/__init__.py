"""Fetching and decoding Norges Bank SDMX data."""
