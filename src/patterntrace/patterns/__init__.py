"""Built-in pattern demonstrations.

Modules are imported by the registry on first lookup, so running a single
demo with ``python -m`` never registers it twice.
"""

BUILTIN_MODULES = (
    "behavioral.chain_of_responsibility",
    "behavioral.command",
    "behavioral.iterator",
    "behavioral.mediator",
    "behavioral.memento",
    "behavioral.observer",
    "behavioral.state",
    "behavioral.strategy",
    "behavioral.template_method",
    "behavioral.visitor",
    "creational.abstract_factory",
    "creational.builder",
    "creational.factory_method",
    "creational.prototype",
    "creational.singleton",
    "structural.adapter",
    "structural.bridge",
    "structural.composite",
    "structural.decorator",
    "structural.facade",
    "structural.flyweight",
    "structural.proxy",
)

__all__ = ["BUILTIN_MODULES"]
