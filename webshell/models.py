from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawOptions(BaseModel):
    """Caller-supplied options. Every field may be omitted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: Optional[str] = None
    target_url: Optional[str] = Field(default=None, examples=["http://example.com"])
    platform: Optional[str] = Field(default=None, examples=["linux"])
    arch: Optional[str] = None
    electron_version: Optional[str] = None
    out: Optional[str] = None
    overwrite: Optional[bool] = None
    conceal: Optional[bool] = None
    icon: Optional[str] = None
    counter: Optional[bool] = None
    width: Optional[int] = None
    height: Optional[int] = None
    show_menu_bar: Optional[bool] = None
    user_agent: Optional[str] = None
    ignore_certificate: Optional[bool] = None
    insecure: Optional[bool] = None
    flash: Optional[str] = None
    inject: Optional[str] = None
    full_screen: Optional[bool] = None
    honest: Optional[bool] = None


class ResolvedOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    dir: str
    name: Optional[str] = None
    target_url: Optional[str] = None
    platform: str
    arch: str
    version: str
    nativefier_version: str
    out: str
    overwrite: Optional[bool] = None
    asar: bool = False
    icon: Optional[str] = None
    counter: bool = False
    width: int
    height: int
    show_menu_bar: bool = False
    user_agent: Optional[str] = None
    ignore_certificate: bool = False
    insecure: bool = False
    flash_plugin_dir: Optional[str] = None
    inject: Optional[str] = None
    full_screen: bool = False


class Inferred(BaseModel):
    """Outcome of one inference call: a value, or the reason there is none."""

    value: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, value: str) -> "Inferred":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "Inferred":
        return cls(reason=reason)


class HealthResponse(BaseModel):
    ok: bool = True
