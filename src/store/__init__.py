"""Label file output layer.

This package owns the CSV schemas and the Click Post file writer.
It turns validated labels into upload-ready files.
"""
