"""ChatMember — união discriminada por `status`."""

from __future__ import annotations

from dataclasses import dataclass

from api.hydration.shapes import BOOL, INT, STR, enum_of, optional, register_object, register_union, required
from api.types.common import USER, User
from api.types.enums import ChatMemberStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatMemberOwner:
    status: ChatMemberStatus
    user: User
    is_anonymous: bool
    custom_title: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatMemberAdministrator:
    status: ChatMemberStatus
    user: User
    can_be_edited: bool
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    custom_title: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatMemberMember:
    status: ChatMemberStatus
    user: User


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatMemberRestricted:
    status: ChatMemberStatus
    user: User
    is_member: bool
    can_send_messages: bool
    until_date: int


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatMemberLeft:
    status: ChatMemberStatus
    user: User


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatMemberBanned:
    status: ChatMemberStatus
    user: User
    until_date: int


_STATUS = required("status", enum_of(ChatMemberStatus))
_USER = required("user", USER)

CHAT_MEMBER = register_union(
    "ChatMember",
    "status",
    {
        ChatMemberStatus.CREATOR.value: register_object(
            ChatMemberOwner,
            _STATUS,
            _USER,
            required("is_anonymous", BOOL),
            optional("custom_title", STR),
        ),
        ChatMemberStatus.ADMINISTRATOR.value: register_object(
            ChatMemberAdministrator,
            _STATUS,
            _USER,
            required("can_be_edited", BOOL),
            required("is_anonymous", BOOL),
            required("can_manage_chat", BOOL),
            required("can_delete_messages", BOOL),
            required("can_restrict_members", BOOL),
            required("can_promote_members", BOOL),
            required("can_change_info", BOOL),
            required("can_invite_users", BOOL),
            optional("custom_title", STR),
        ),
        ChatMemberStatus.MEMBER.value: register_object(ChatMemberMember, _STATUS, _USER),
        ChatMemberStatus.RESTRICTED.value: register_object(
            ChatMemberRestricted,
            _STATUS,
            _USER,
            required("is_member", BOOL),
            required("can_send_messages", BOOL),
            required("until_date", INT),
        ),
        ChatMemberStatus.LEFT.value: register_object(ChatMemberLeft, _STATUS, _USER),
        ChatMemberStatus.KICKED.value: register_object(
            ChatMemberBanned,
            _STATUS,
            _USER,
            required("until_date", INT),
        ),
    },
)

ChatMember = (
    ChatMemberOwner
    | ChatMemberAdministrator
    | ChatMemberMember
    | ChatMemberRestricted
    | ChatMemberLeft
    | ChatMemberBanned
)
