from __future__ import annotations

from typing import Mapping

type Extensions = tuple[str, ...]
type MimeIndex = Mapping[str, Extensions]
type ExtensionIndex = Mapping[str, str]
