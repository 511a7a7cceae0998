from .bans import BansApi
from .commands import CommandsApi
from .interactions import CallbackType, InteractionsApi
from .members import MembersApi
from .messages import MessagesApi
from .reactions import ReactionsApi
from .roles import RolesApi
from .users import UsersApi

__all__ = [
    "BansApi",
    "CallbackType",
    "CommandsApi",
    "InteractionsApi",
    "MembersApi",
    "MessagesApi",
    "ReactionsApi",
    "RolesApi",
    "UsersApi",
]
