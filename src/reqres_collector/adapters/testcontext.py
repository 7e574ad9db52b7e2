"""TestContext built from a pytest item.

Modules and classes along the item's node chain act as nested test groups,
the module being the outermost one. Typical use from a conftest.py:

    @pytest.fixture
    def record(request, collector):
        def _record(http_request, http_response):
            collector.collect(NodeTestContext.from_item(request.node), http_request, http_response)
        return _record
"""

import inspect
from dataclasses import dataclass


@dataclass(frozen=True)
class Group:
    description: str
    parent: "Group | None" = None


@dataclass(frozen=True)
class NodeTestContext:
    full_description: str
    group: Group | None = None

    @classmethod
    def from_item(cls, item) -> "NodeTestContext":
        group = None
        descriptions = []
        for node in item.listchain():
            obj = getattr(node, "obj", None)
            if not (inspect.ismodule(obj) or inspect.isclass(obj)):
                continue
            description = _describe(obj, node.name)
            group = Group(description=description, parent=group)
            descriptions.append(description)

        descriptions.append(item.name)
        return cls(full_description=" ".join(descriptions), group=group)


def _describe(obj, fallback: str) -> str:
    # Own docstring only, a class must not inherit its base's
    doc = inspect.cleandoc(obj.__doc__ or "")
    if doc:
        return doc.splitlines()[0].strip()
    if inspect.ismodule(obj):
        return obj.__name__.rsplit(".", 1)[-1]
    return fallback
