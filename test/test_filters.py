"""Tests for the asset_digest Jinja2 filter and its Pelican registration."""

import hashlib
import logging
from types import SimpleNamespace

import pytest
from jinja2 import Environment
from pelican import signals

from asset_digest import add_filters, register

_log = logging.getLogger(__name__)

JS = b"console.log('hello');\n"
JS_MD5 = hashlib.md5(JS).hexdigest()


@pytest.fixture
def content_path(tmp_path):
    """Create a Pelican content directory holding js/app.js."""
    content = tmp_path / "content"
    (content / "js").mkdir(parents=True)
    (content / "js" / "app.js").write_bytes(JS)
    return content


@pytest.fixture
def env():
    """A Jinja environment with the plugin's filters added, as Pelican would."""
    generator = SimpleNamespace(env=Environment(), settings={})
    add_filters(generator)
    return generator.env


def render(env, source, **context):
    return env.from_string(source).render(**context)


def test_filter_is_registered(env):
    assert "asset_digest" in env.filters


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/js/app.js", f"/js/app.js?v={JS_MD5}"),
        ("js/app.js", f"js/app.js?v={JS_MD5}"),
        ("/js/missing.js", "/js/missing.js"),
    ],
)
def test_filter_renders(env, content_path, path, expected):
    """Test the filter inside a template rendered with Pelican's PATH setting."""
    result = render(env, "{{ path | asset_digest }}", path=path, PATH=str(content_path))

    assert result == expected
    _log.info(f"✓ {path} -> {result}")


def test_filter_in_attribute(env, content_path):
    template = '<script src="{{ \'/js/app.js\' | asset_digest }}"></script>'

    result = render(env, template, PATH=str(content_path))

    assert result == f'<script src="/js/app.js?v={JS_MD5}"></script>'


def test_asset_digest_root_overrides_path(env, content_path, tmp_path):
    """Test that ASSET_DIGEST_ROOT is used instead of PATH when set."""
    theme_static = tmp_path / "theme" / "static"
    theme_static.mkdir(parents=True)
    css = b"h1 { font-weight: bold; }\n"
    (theme_static / "style.css").write_bytes(css)

    result = render(
        env,
        "{{ '/style.css' | asset_digest }}",
        PATH=str(content_path),
        ASSET_DIGEST_ROOT=str(theme_static),
    )

    assert result == f"/style.css?v={hashlib.md5(css).hexdigest()}"


def test_relative_asset_digest_root_resolves_against_path(env, content_path):
    result = render(
        env,
        "{{ '/app.js' | asset_digest }}",
        PATH=str(content_path),
        ASSET_DIGEST_ROOT="js",
    )

    assert result == f"/app.js?v={JS_MD5}"


def test_algorithm_and_length_settings(env, content_path):
    result = render(
        env,
        "{{ '/js/app.js' | asset_digest }}",
        PATH=str(content_path),
        ASSET_DIGEST_ALGORITHM="sha256",
        ASSET_DIGEST_LENGTH=10,
    )

    assert result == f"/js/app.js?v={hashlib.sha256(JS).hexdigest()[:10]}"


def test_no_root_in_context(env, caplog):
    """Test that the path passes through with a warning when there is no root."""
    with caplog.at_level(logging.WARNING):
        result = render(env, "{{ '/js/app.js' | asset_digest }}")

    assert result == "/js/app.js"
    assert any("No PATH or ASSET_DIGEST_ROOT" in message for message in caplog.messages)


def test_empty_path(env, content_path):
    assert render(env, "{{ '' | asset_digest }}", PATH=str(content_path)) == ""


def test_register_connects_generator_init():
    """Test that register() hooks add_filters onto Pelican's generator_init signal."""
    register()
    try:
        generator = SimpleNamespace(env=Environment(), settings={})
        signals.generator_init.send(generator)

        assert "asset_digest" in generator.env.filters
    finally:
        signals.generator_init.disconnect(add_filters)
