"""pytest plugin for jxon.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from jxon import JxonConfig, JxonParser


@pytest.fixture(scope="session")
def xml_to_jxon() -> Any:
    """Fixture that returns a callable XML-to-JXON converter.

    Session-scoped because the returned callable is stateless (a fresh
    ``JxonParser`` is built per call).

    Usage in tests::

        def test_feed(xml_to_jxon):
            assert xml_to_jxon("<a><b>1</b></a>") == {"a": {"b": 1}}

    Returns:
        A callable ``_convert(xml, config=None) -> JxonObject``.
    """

    def _convert(xml: str | bytes, config: JxonConfig | None = None) -> Any:
        return JxonParser(config=config).parse_xml(xml)

    return _convert
