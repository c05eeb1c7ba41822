from pathlib import Path

import pytest

from storefront.config import DEFAULT_PUBLIC_DIR, load_settings
from storefront.errors import StartupConfigError


def test_missing_secret_is_fatal():
    with pytest.raises(StartupConfigError):
        load_settings({})


def test_blank_or_quoted_secret_is_cleaned():
    with pytest.raises(StartupConfigError):
        load_settings({"STRIPE_SECRET_KEY": "  '' "})
    assert load_settings({"STRIPE_SECRET_KEY": ' "sk_test_abc" '}).stripe_secret_key == "sk_test_abc"


def test_legacy_variable_name_is_accepted():
    assert load_settings({"stripe_key": "sk_test_legacy"}).stripe_secret_key == "sk_test_legacy"


def test_defaults():
    s = load_settings({"STRIPE_SECRET_KEY": "sk_test_abc"})
    assert s.success_url == "http://127.0.0.1:3000/success"
    assert s.cancel_url == "http://127.0.0.1:3000/cancel"
    assert s.stripe_timeout == 10.0
    assert s.public_dir == DEFAULT_PUBLIC_DIR
    assert s.cors_origins == ("*",)


def test_overrides():
    s = load_settings({
        "STRIPE_SECRET_KEY": "sk_test_abc",
        "BASE_URL": "https://shop.example.com/",
        "CHECKOUT_SUCCESS_PATH": "/merci",
        "CHECKOUT_CANCEL_PATH": "/panier",
        "STRIPE_TIMEOUT_SECONDS": "2.5",
        "PUBLIC_DIR": "/srv/public",
        "ALLOWED_HOSTS": "shop.example.com, www.shop.example.com",
    })
    assert s.success_url == "https://shop.example.com/merci"
    assert s.cancel_url == "https://shop.example.com/panier"
    assert s.stripe_timeout == 2.5
    assert s.public_dir == Path("/srv/public")
    assert s.allowed_hosts == ("shop.example.com", "www.shop.example.com")


@pytest.mark.parametrize("raw", ["abc", "0", "-1"])
def test_invalid_timeout_is_fatal(raw):
    with pytest.raises(StartupConfigError):
        load_settings({"STRIPE_SECRET_KEY": "sk_test_abc", "STRIPE_TIMEOUT_SECONDS": raw})
