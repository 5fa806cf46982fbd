"""
Normalized description of a component to generate.

Converts parser output into the structure the generator renders from.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .parser import ComponentUsage, TagShape
from .types import InferredType, infer_type


@dataclass
class Prop:
    """A single prop of the generated component."""

    name: str
    raw_value: str
    type: InferredType = InferredType.ANY


@dataclass
class ComponentSchema:
    """Everything needed to render one component file."""

    name: str
    props: List[Prop] = field(default_factory=list)
    shape: TagShape = TagShape.SELF_CLOSING

    @property
    def wraps_children(self) -> bool:
        return self.shape == TagShape.PAIRED_WITH_CONTENT

    @property
    def has_props(self) -> bool:
        return bool(self.props)

    def add_prop(self, prop: Prop) -> None:
        """Add a prop to this schema."""
        self.props.append(prop)

    def parameter_names(self) -> List[str]:
        """Names the component destructures, in declaration order."""
        names = [prop.name for prop in self.props]
        if self.wraps_children:
            names.append("children")
        return names


def convert_usage(name: str, usage: Optional[ComponentUsage]) -> ComponentSchema:
    """
    Convert a parsed usage into a ComponentSchema.

    Args:
        name: Component name
        usage: Output of parse_usage(), or None if the tag was not found

    Returns:
        ComponentSchema with one prop per attribute
    """
    schema = ComponentSchema(name=name)
    if usage is None:
        return schema

    schema.shape = usage.shape
    for prop_name, raw_value in usage.attributes.items():
        schema.add_prop(
            Prop(name=prop_name, raw_value=raw_value, type=infer_type(raw_value))
        )

    return schema
