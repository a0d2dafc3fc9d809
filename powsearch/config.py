import os
import json
import logging
import functools
from typing import *
from dataclasses import dataclass
from .error import ConfigurationError


@dataclass
class Config:
    algorithm: str = 'sha256'
    encoding: str = 'utf-8'
    stop_on_wrap: bool = False
    log_level: str = 'WARNING'
    bench_text: str = 'All you need is love'
    bench_start: int = 0
    bench_stop: int = 16
    bench_target: int = 1024
    bench_min_target: int = 5

    def __post_init__(self):
        for name in ['algorithm', 'encoding', 'log_level', 'bench_text']:
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError('%s should be str, got %r' % (name, getattr(self, name)))
        if not isinstance(self.stop_on_wrap, bool):
            raise ConfigurationError('stop_on_wrap should be bool, got %r' % self.stop_on_wrap)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError('unknown log_level %r' % self.log_level)
        self.log_level = self.log_level.upper()
        for name in ['bench_start', 'bench_stop', 'bench_target', 'bench_min_target']:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError('%s should be a non-negative int, got %r' % (name, value))
        if self.bench_target < 1 or self.bench_min_target < 1:
            raise ConfigurationError('bench_target and bench_min_target should be at least 1')


def find_config_file() -> Optional[str]:
    for cfg_file in [
        "config.json",
        os.path.expanduser("~/.powsearch/config.json"),
        "/etc/powsearch/config.json",
    ]:
        if os.path.exists(cfg_file):
            return cfg_file
    return None


def load_config(cfg_file: str) -> Config:
    with open(cfg_file) as fi:
        try:
            return Config(**json.load(fi))
        except json.JSONDecodeError as exc:
            raise ConfigurationError('malformed config file %s: %s' % (cfg_file, exc))
        except TypeError as exc:
            raise ConfigurationError('invalid key in config file %s: %s' % (cfg_file, exc))


@functools.lru_cache(maxsize=None)
def get_config():
    cfg_file = find_config_file()
    if cfg_file is None:
        return Config()
    return load_config(cfg_file)
