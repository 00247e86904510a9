# flake8: noqa
from .cli import sledkv
