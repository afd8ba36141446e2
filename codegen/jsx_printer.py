"""
Pretty-printer for the JSX syntax tree built in ``jsx_ast``.

Output conventions: 2-space indentation, single-quoted JS strings,
double-quoted JSX attribute strings, semicolons.
"""

import re
from typing import List

from codegen.base import format_number
from codegen.jsx_ast import (
    ExportDefaultDeclaration,
    Identifier,
    ImportDeclaration,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXText,
    Module,
    NumericLiteral,
    ObjectExpression,
    StringLiteral,
    VariableDeclaration,
)

INDENT = '  '

_IDENTIFIER_RE = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')
# Characters that cannot appear verbatim in JSX text
_JSX_TEXT_UNSAFE = re.compile(r'[{}<>&\n]|^\s|\s$')


def js_string(value: str) -> str:
    """Single-quoted JavaScript string literal."""
    escaped = (
        value.replace('\\', '\\\\')
        .replace("'", "\\'")
        .replace('\n', '\\n')
        .replace('\r', '\\r')
    )
    return f"'{escaped}'"


def jsx_text(value: str) -> str:
    """Literal JSX child text, or an expression container when it cannot be literal."""
    if _JSX_TEXT_UNSAFE.search(value):
        return '{' + js_string(value) + '}'
    return value


class JSXPrinter:
    """Visitor turning a syntax tree back into source text."""

    def print(self, node, level: int = 0) -> str:
        method = getattr(self, 'visit_' + type(node).__name__, None)
        if method is None:
            raise TypeError(f"Cannot print node of type {type(node).__name__}")
        return method(node, level)

    # -- module items -------------------------------------------------------

    def visit_Module(self, node: Module, level: int) -> str:
        return '\n\n'.join(self.print(item, level) for item in node.body) + '\n'

    def visit_ImportDeclaration(self, node: ImportDeclaration, level: int) -> str:
        names = ', '.join(spec.local.value for spec in node.specifiers)
        return f"import {names} from {js_string(node.source.value)};"

    def visit_VariableDeclaration(self, node: VariableDeclaration, level: int) -> str:
        parts = []
        for decl in node.declarations:
            fn = decl.init
            params = ', '.join(p.value for p in fn.params)
            prefix = 'async ' if fn.is_async else ''
            body = self._print_block(fn.body.stmts, level)
            parts.append(f"{decl.id.value} = {prefix}({params}) => {body}")
        return f"{node.kind} {', '.join(parts)};"

    def visit_ExportDefaultDeclaration(self, node: ExportDefaultDeclaration, level: int) -> str:
        return f"export default {node.decl.value};"

    def _print_block(self, stmts, level: int) -> str:
        inner = INDENT * (level + 1)
        lines = ['{']
        for stmt in stmts:
            lines.append(inner + self._print_return(stmt.argument, level + 1))
        lines.append(INDENT * level + '}')
        return '\n'.join(lines)

    def _print_return(self, argument: JSXElement, level: int) -> str:
        jsx = self.print(argument, level + 1)
        if '\n' not in jsx:
            return f"return {jsx};"
        return f"return (\n{INDENT * (level + 1)}{jsx}\n{INDENT * level});"

    # -- expressions --------------------------------------------------------

    def visit_Identifier(self, node: Identifier, level: int) -> str:
        return node.value

    def visit_StringLiteral(self, node: StringLiteral, level: int) -> str:
        return js_string(node.value)

    def visit_NumericLiteral(self, node: NumericLiteral, level: int) -> str:
        return format_number(node.value)

    def visit_ObjectExpression(self, node: ObjectExpression, level: int) -> str:
        if not node.properties:
            return '{}'
        props = []
        for prop in node.properties:
            key = prop.key.value
            if not _IDENTIFIER_RE.match(key):
                key = js_string(key)
            props.append(f"{key}: {self.print(prop.value, level)}")
        return '{ ' + ', '.join(props) + ' }'

    # -- JSX ----------------------------------------------------------------

    def visit_JSXText(self, node: JSXText, level: int) -> str:
        return jsx_text(node.value)

    def visit_JSXExpressionContainer(self, node: JSXExpressionContainer, level: int) -> str:
        return '{' + self.print(node.expression, level) + '}'

    def visit_JSXAttribute(self, node: JSXAttribute, level: int) -> str:
        name = node.name.value
        if node.value is None:
            return name
        if isinstance(node.value, StringLiteral):
            if '"' in node.value.value or '\n' in node.value.value:
                return f"{name}={{{js_string(node.value.value)}}}"
            return f'{name}="{node.value.value}"'
        return f"{name}={self.print(node.value, level)}"

    def visit_JSXElement(self, node: JSXElement, level: int) -> str:
        opening = node.opening
        tag = opening.name.value
        attrs = ''.join(' ' + self.print(attr, level) for attr in opening.attrs)

        if opening.self_closing:
            return f"<{tag}{attrs} />"

        closing_tag = node.closing.name.value if node.closing else tag
        if all(isinstance(child, JSXText) for child in node.children):
            text = ''.join(self.print(child, level) for child in node.children)
            return f"<{tag}{attrs}>{text}</{closing_tag}>"

        inner = INDENT * (level + 1)
        lines: List[str] = [f"<{tag}{attrs}>"]
        for child in node.children:
            lines.append(inner + self.print(child, level + 1))
        lines.append(f"{INDENT * level}</{closing_tag}>")
        return '\n'.join(lines)


def print_module(module: Module) -> str:
    """Serialize a module tree to source text."""
    return JSXPrinter().print(module)
