"""
Storefront E2E Test Suite

Test categories:
- unit/ - Page object and helper logic against a mocked Page
- e2e/  - Browser tests against the live storefront (smoke and regression)
"""
