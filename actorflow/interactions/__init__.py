"""Atomic browser and HTTP interactions."""

from actorflow.interactions.api import LAST_RESPONSE, Delete, Get, Patch, Post, Put, Request
from actorflow.interactions.base import Interaction
from actorflow.interactions.browser import (
    Click,
    Enter,
    Open,
    Scroll,
    Select,
    WaitForLoad,
    WaitUntil,
)

__all__ = [
    "LAST_RESPONSE",
    "Click",
    "Delete",
    "Enter",
    "Get",
    "Interaction",
    "Open",
    "Patch",
    "Post",
    "Put",
    "Request",
    "Scroll",
    "Select",
    "WaitForLoad",
    "WaitUntil",
]
