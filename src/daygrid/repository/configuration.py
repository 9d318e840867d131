# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daygrid import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError(f"empty configuration file {configuration.APP_CONFIG_PATH}")

        # Migration: back-fill settings added after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        day_start_offset_minutes: Optional[int] = None,
        quantum_minutes: Optional[int] = None,
        default_duration_minutes: Optional[int] = None,
        remove_default_duration: bool = False,
        activity_kinds: Optional[list[str]] = None,
        overlap_detection: Optional[str] = None,
        show_header: Optional[bool] = None,
        show_legend: Optional[bool] = None,
        random_color_for_activities: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if day_start_offset_minutes is not None:
            self.config["day_start_offset_minutes"] = day_start_offset_minutes
        if quantum_minutes is not None:
            self.config["quantum_minutes"] = quantum_minutes
        if default_duration_minutes is not None:
            self.config["default_duration_minutes"] = default_duration_minutes
        if remove_default_duration:
            self.config["default_duration_minutes"] = None
        if activity_kinds is not None:
            self.config["activity_kinds"] = activity_kinds
        if overlap_detection is not None:
            self.config["overlap_detection"] = overlap_detection
        if show_header is not None:
            self.config["show_header"] = show_header
        if show_legend is not None:
            self.config["show_legend"] = show_legend
        if random_color_for_activities is not None:
            self.config["random_color_for_activities"] = random_color_for_activities


CONFIGURATION_REPO = ConfigurationRepository()
