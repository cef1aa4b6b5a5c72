"""oaienum descriptor parser and code generator."""

from .parser import *
from .python import render as render
from .python import render_schemas as render_schemas
