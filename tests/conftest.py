import json
from pathlib import Path

import pytest

from theming import Brand, IntentExpander, OverrideValidator


@pytest.fixture
def brand():
    return Brand()


@pytest.fixture
def validator():
    return OverrideValidator()


@pytest.fixture
def expander(brand, validator):
    return IntentExpander(brand, validator)


@pytest.fixture
def brand_file(tmp_path: Path) -> Path:
    payload = {
        "fonts": {"SansSerif": "Inter, sans-serif", "monospace": "JetBrains Mono, monospace"},
        "light": {"primary": "#6200EE", "Surface": "White"},
        "dark": {"primary": "rgb(187, 134, 252)"},
    }
    path = tmp_path / "brand.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
