# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Callable, Iterator, Optional

import pendulum
import pytest
from yaml import dump

from daygrid import configuration
from daygrid.model.activity import Activity
from daygrid.model.interval import Interval
from daygrid.model.style import Style
from daygrid.repository.configuration import CONFIGURATION_REPO
from daygrid.template.activity import get_activity_template
from daygrid.time import MINUTES_PER_DAY, date_to_absolute_day
from daygrid.view import state as view_state

# Monday
BASE_DAY = date_to_absolute_day(pendulum.date(2026, 10, 19))


def at(day: int, hour: int, minute: int = 0) -> int:
    """Minutes since the epoch for a day offset from BASE_DAY."""
    return (BASE_DAY + day) * MINUTES_PER_DAY + hour * 60 + minute


@pytest.fixture
def base_day() -> int:
    return BASE_DAY


@pytest.fixture
def make_interval() -> Callable[..., Interval]:
    def _make_interval(
        start: int,
        end: int,
        label: Optional[str] = None,
        style: Optional[Style] = None,
    ) -> Interval:
        return {"start": start, "end": end, "label": label, "style": style}

    return _make_interval


@pytest.fixture
def make_activity() -> Callable[..., Activity]:
    def _make_activity(**fields: Any) -> Activity:
        activity = get_activity_template()
        activity["absolute_day"] = BASE_DAY
        activity["hour_minute"] = (10, 0)
        activity["kind"] = "scheduled"
        activity.update(fields)  # type: ignore[typeddict-item]
        return activity

    return _make_activity


@pytest.fixture(autouse=True)
def reset_view_state() -> Iterator[None]:
    view_state.set_show_header(True)
    view_state.set_show_legend(True)
    yield
    view_state.set_show_header(True)
    view_state.set_show_legend(True)


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration at a fresh file holding the defaults."""
    path = tmp_path / "config" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(dump(dict(configuration.get_default_configuration())))

    monkeypatch.setattr(configuration, "CONFIG_PATH", path.parent)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return path


@pytest.fixture
def write_activities(tmp_path: Path) -> Callable[[Any], Path]:
    def _write_activities(content: Any) -> Path:
        path = tmp_path / "activities.yaml"
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(dump(content))
        return path

    return _write_activities
