"""
Storefront E2E

Page objects, fixture data and run configuration for the Swag Labs
browser test suite.
"""

__version__ = "0.1.0"
