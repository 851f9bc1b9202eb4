"""Order ingestion.

This package reads Shopify order exports and drives the conversion run.
It hands typed order records to the transform layer.
"""
