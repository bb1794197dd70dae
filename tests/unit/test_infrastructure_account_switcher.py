"""Unit tests for ContextVarAccountSwitcher."""

import asyncio

import pytest

from src.domain.entities import ANONYMOUS, Identity
from src.infrastructure.security import ContextVarAccountSwitcher


@pytest.mark.unit
class TestContextVarAccountSwitcher:
    """Test identity stacking and isolation."""

    def test_default_identity_is_anonymous(self):
        assert ContextVarAccountSwitcher().current_identity() == ANONYMOUS

    def test_custom_default_identity(self):
        service = Identity(subject="service")

        assert ContextVarAccountSwitcher(service).current_identity() == service

    def test_nested_switches_unwind_in_order(self):
        switcher = ContextVarAccountSwitcher()
        editor = Identity(subject="editor")

        switcher.switch_to(editor)
        switcher.switch_to_anonymous()
        assert switcher.current_identity() == ANONYMOUS

        switcher.switch_back()
        assert switcher.current_identity() == editor

        switcher.switch_back()
        assert switcher.current_identity() == ANONYMOUS

    def test_unmatched_switch_back_raises(self):
        with pytest.raises(RuntimeError):
            ContextVarAccountSwitcher().switch_back()

    async def test_tasks_do_not_share_identity(self):
        switcher = ContextVarAccountSwitcher()
        switched = asyncio.Event()

        async def as_editor() -> str:
            switcher.switch_to(Identity(subject="editor"))
            switched.set()
            await asyncio.sleep(0)
            subject = switcher.current_identity().subject
            switcher.switch_back()
            return subject

        async def observer() -> str:
            await switched.wait()
            return switcher.current_identity().subject

        results = await asyncio.gather(as_editor(), observer())

        assert results == ["editor", "anonymous"]
