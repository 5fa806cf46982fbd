"""
Template engine wrapper for component generation.

Provides a simple interface for Jinja2 template rendering
with the built-in component file template.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
    select_autoescape,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment for source code output."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            # Generated files are source code, never markup to escape
            autoescape=select_autoescape([], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            # Convert to DictLoader to support in-memory templates
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.loader.get_source(self._env, template_name)
        except TemplateNotFound:
            return False
        return True


COMPONENT_TEMPLATE_NAME = "component.tsx"

# Function component; a props type is emitted only when there is something
# to declare.
COMPONENT_TEMPLATE = """\
{{ library_import }}

{% if props_type %}
type {{ props_type }} = {
{% for prop in props %}
{{ indent }}{{ prop.name }}: {{ prop.type }};
{% endfor %}
{% if wraps_children %}
{{ indent }}children: {{ children_type }};
{% endif %}
};

{% endif %}
const {{ name }} = ({% if parameters %}{ {{ parameters | join(", ") }} }: {{ props_type }}{% endif %}) => {
{{ indent }}return (
{{ indent * 2 }}<{{ wrapper }}>
{{ indent * 3 }}{{ body }}
{{ indent * 2 }}</{{ wrapper }}>
{{ indent }});
};

export default {{ name }};
"""


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """
    Create a template engine with the built-in templates registered.

    Templates found in ``template_dir`` take precedence; the built-in
    component template is used when the directory does not provide one.
    """
    engine = TemplateEngine(template_dir)
    if not engine.template_exists(COMPONENT_TEMPLATE_NAME):
        engine.add_template(COMPONENT_TEMPLATE_NAME, COMPONENT_TEMPLATE)
    return engine
