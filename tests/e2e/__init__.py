"""
Storefront E2E Test Suite

End-to-end browser tests for the Swag Labs storefront using Playwright.

Structure:
    conftest.py   - Fixtures, saved login session and hooks
    smoke/        - Critical-path checks (authenticated)
    regression/   - Full feature coverage per page
    artifacts/    - Screenshots, auth state, traces (generated)

Running Tests:
    # Install dependencies
    pip install -e ".[test]"
    playwright install

    # Credentials come from the environment or a .env file
    cp .env.example .env

    # Run all tests
    pytest tests/e2e/

    # Run with visible browser
    pytest tests/e2e/ --headed

    # Run specific browser
    pytest tests/e2e/ --browser firefox

    # Run smoke tests only
    pytest tests/e2e/ -m smoke

    # Run one feature area
    pytest tests/e2e/ -m cart

    # Target another environment from fixtures/data/environments.json
    TEST_ENV=production pytest tests/e2e/
"""
