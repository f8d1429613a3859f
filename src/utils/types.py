from typing import Any, Dict, Union

from discord import Interaction
from discord.ext.commands import Context

CommandContext = Union[Context, Interaction]
JsonDict = Dict[str, Any]
