"""
CategoryTree - Hierarchical product category management for e-commerce catalogs
"""

__version__ = "1.0.0"
