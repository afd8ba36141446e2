"""
JSX/ECMAScript syntax tree nodes and builders for the React backend.

The node shapes mirror a generic JavaScript interchange AST. Every node carries
a ``Span``; generated nodes use the synthetic zero span, which is never used
for diagnostics.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Span:
    start: int = 0
    end: int = 0
    ctxt: int = 0


def create_span() -> Span:
    return Span()


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Identifier:
    value: str
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class StringLiteral:
    value: str
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class NumericLiteral:
    value: Union[int, float]
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class Property:
    key: Identifier
    value: Union[StringLiteral, NumericLiteral]
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class ObjectExpression:
    properties: Tuple[Property, ...] = ()
    span: Span = field(default_factory=create_span)


# ---------------------------------------------------------------------------
# JSX
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class JSXText:
    value: str
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class JSXExpressionContainer:
    expression: Union[ObjectExpression, StringLiteral, NumericLiteral]
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class JSXAttribute:
    name: Identifier
    value: Optional[Union[StringLiteral, JSXExpressionContainer]] = None
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class JSXOpeningElement:
    name: Identifier
    attrs: Tuple[JSXAttribute, ...] = ()
    self_closing: bool = False
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class JSXClosingElement:
    name: Identifier
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class JSXElement:
    opening: JSXOpeningElement
    closing: Optional[JSXClosingElement] = None
    children: Tuple[Union['JSXElement', JSXText], ...] = ()
    span: Span = field(default_factory=create_span)


# ---------------------------------------------------------------------------
# Statements / module items
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReturnStatement:
    argument: JSXElement
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class BlockStatement:
    stmts: Tuple[ReturnStatement, ...] = ()
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class ArrowFunctionExpression:
    body: BlockStatement
    params: Tuple[Identifier, ...] = ()
    is_async: bool = False
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class VariableDeclarator:
    id: Identifier
    init: ArrowFunctionExpression
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class VariableDeclaration:
    declarations: Tuple[VariableDeclarator, ...]
    kind: str = 'const'
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class ImportDefaultSpecifier:
    local: Identifier
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class ImportDeclaration:
    specifiers: Tuple[ImportDefaultSpecifier, ...]
    source: StringLiteral
    span: Span = field(default_factory=create_span)


@dataclass(frozen=True)
class ExportDefaultDeclaration:
    decl: Identifier
    span: Span = field(default_factory=create_span)


ModuleItem = Union[ImportDeclaration, VariableDeclaration, ExportDefaultDeclaration]


@dataclass(frozen=True)
class Module:
    body: Tuple[ModuleItem, ...] = ()
    span: Span = field(default_factory=create_span)


# ============================================================================
# Builders
# ============================================================================

def create_import_statement(source: str, default_import: str) -> ImportDeclaration:
    """import <default_import> from '<source>';"""
    return ImportDeclaration(
        specifiers=(ImportDefaultSpecifier(local=Identifier(default_import)),),
        source=StringLiteral(source),
    )


def create_component_declaration(name: str, body: JSXElement) -> VariableDeclaration:
    """const <name> = () => { return <body>; };"""
    return VariableDeclaration(
        declarations=(
            VariableDeclarator(
                id=Identifier(name),
                init=ArrowFunctionExpression(
                    body=BlockStatement(stmts=(ReturnStatement(argument=body),)),
                ),
            ),
        ),
    )


def create_default_export(name: str) -> ExportDefaultDeclaration:
    return ExportDefaultDeclaration(decl=Identifier(name))


def create_element(tag_name: str, attributes: List[JSXAttribute],
                   children: List[JSXElement]) -> JSXElement:
    """Element wrapping children; self-closing when there are none."""
    return JSXElement(
        opening=JSXOpeningElement(
            name=Identifier(tag_name),
            attrs=tuple(attributes),
            self_closing=not children,
        ),
        closing=JSXClosingElement(name=Identifier(tag_name)) if children else None,
        children=tuple(children),
    )


def create_text_element(tag_name: str, attributes: List[JSXAttribute], text: str) -> JSXElement:
    return JSXElement(
        opening=JSXOpeningElement(name=Identifier(tag_name), attrs=tuple(attributes)),
        closing=JSXClosingElement(name=Identifier(tag_name)),
        children=(JSXText(text),),
    )


def create_attribute(
    name: str,
    value: Optional[Union[str, ObjectExpression]],
) -> JSXAttribute:
    """String value -> name="value"; expression -> name={...}; None -> bare boolean attribute."""
    if value is None:
        attr_value = None
    elif isinstance(value, str):
        attr_value = StringLiteral(value)
    else:
        attr_value = JSXExpressionContainer(expression=value)
    return JSXAttribute(name=Identifier(name), value=attr_value)


def create_style_object(styles: Dict[str, Union[str, int, float]]) -> ObjectExpression:
    """Object literal with keys passed through unmodified."""
    return ObjectExpression(properties=tuple(
        Property(
            key=Identifier(key),
            value=NumericLiteral(value) if isinstance(value, (int, float)) else StringLiteral(value),
        )
        for key, value in styles.items()
    ))
