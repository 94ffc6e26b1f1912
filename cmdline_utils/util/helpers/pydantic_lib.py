# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict


if TYPE_CHECKING:
    import rich.repr


class ConfigBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def __rich_repr__(self) -> "rich.repr.Result":
        for attr, info in type(self).model_fields.items():
            if info.repr is False:
                continue
            yield attr, getattr(self, attr, None)
