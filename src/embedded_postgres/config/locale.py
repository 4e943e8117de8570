"""Locale settings passed to initdb."""
from dataclasses import dataclass, fields
from typing import List, Optional


@dataclass(frozen=True)
class LocaleSpec:
    """Locale options; unset fields leave the executable's defaults in place"""
    encoding: Optional[str] = None
    locale: Optional[str] = None
    lc_collate: Optional[str] = None
    lc_ctype: Optional[str] = None
    lc_messages: Optional[str] = None
    lc_monetary: Optional[str] = None
    lc_numeric: Optional[str] = None
    lc_time: Optional[str] = None
    no_locale: bool = False

    def build_command_line(self) -> List[str]:
        """Flags in field order, e.g. ``--encoding=UTF8 --lc-collate=en_US``."""
        cmd = []
        for field in fields(self):
            if field.name == "no_locale":
                continue
            value = getattr(self, field.name)
            if value is not None:
                cmd.append(f"--{field.name.replace('_', '-')}={value}")

        if self.no_locale:
            cmd.append("--no-locale")

        return cmd
