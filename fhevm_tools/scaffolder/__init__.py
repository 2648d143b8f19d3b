"""FHEVM tools scaffolder -- generates standalone example projects.

Two generators share the Jinja2 renderer and the static registry:

* :class:`ExampleGenerator` copies the examples tree for one example.
* :class:`CategoryGenerator` assembles every example of a category.

Quick usage::

    from fhevm_tools.config import Config
    from fhevm_tools.scaffolder import CategoryGenerator, ExampleGenerator

    config = Config(root_dir=Path("fhevm-examples"))
    ExampleGenerator(config).generate("artifact-auction", "./output/test1")
    CategoryGenerator(config).generate("basic")
"""

from fhevm_tools.scaffolder.category_gen import CategoryGenerator
from fhevm_tools.scaffolder.example_gen import ExampleGenerator
from fhevm_tools.scaffolder.results import GenerationResult
from fhevm_tools.scaffolder.templates import TemplateRenderer

__all__ = [
    "CategoryGenerator",
    "ExampleGenerator",
    "GenerationResult",
    "TemplateRenderer",
]
