from __future__ import annotations

import importlib
import pkgutil

import pytest

import gocardless_pro


def _module_names() -> list[str]:
    names = [gocardless_pro.__name__]
    for info in pkgutil.walk_packages(gocardless_pro.__path__, prefix="gocardless_pro."):
        names.append(info.name)
    return sorted(names)


@pytest.mark.parametrize("module_name", _module_names())
def test_module_declares_resolvable_dunder_all(module_name: str) -> None:
    module = importlib.import_module(module_name)
    exported = getattr(module, "__all__", None)
    assert isinstance(exported, list), f"{module_name} has no __all__ list"
    assert len(set(exported)) == len(exported)
    unresolved = [name for name in exported if not hasattr(module, name)]
    assert unresolved == []
