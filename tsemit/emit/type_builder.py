"""
Type declaration builder.

TypeBuilder is the root of the builder graph: a class, interface, type
alias, enum or const enum together with its members, nested types and the
imports of the emitted file. Every mutator returns a new builder.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional, Tuple

from .constructor import ConstructorBuilder
from .field import FieldBuilder
from .kinds import TypeKind
from .method import MethodBuilder, type_parameter
from .property import PropertyBuilder

if TYPE_CHECKING:
    from .options import EmitOptions
    from .result import OptionalEmit


@dataclass(frozen=True)
class TypeBuilder:
    """Immutable description of one TypeScript type declaration."""
    name: str
    kind: TypeKind = TypeKind.CLASS
    is_exported: bool = False
    is_default_export: bool = False
    is_abstract: bool = False
    is_declare: bool = False
    decorators: Tuple[str, ...] = ()
    js_doc: Optional[str] = None
    type_parameters: Tuple[str, ...] = ()
    extends_clause: Tuple[str, ...] = ()
    implements_clause: Tuple[str, ...] = ()
    index_signatures: Tuple[str, ...] = ()
    fields: Tuple[FieldBuilder, ...] = ()
    constructors: Tuple[ConstructorBuilder, ...] = ()
    properties: Tuple[PropertyBuilder, ...] = ()
    methods: Tuple[MethodBuilder, ...] = ()
    nested_types: Tuple["TypeBuilder", ...] = ()
    enum_members: Tuple[Tuple[str, Optional[str]], ...] = ()
    imports: Tuple[str, ...] = ()
    type_alias_definition: Optional[str] = None

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def class_(cls, name: str) -> "TypeBuilder":
        return cls(name=name, kind=TypeKind.CLASS)

    @classmethod
    def interface(cls, name: str) -> "TypeBuilder":
        return cls(name=name, kind=TypeKind.INTERFACE)

    @classmethod
    def type_alias(cls, name: str, definition) -> "TypeBuilder":
        return cls(
            name=name,
            kind=TypeKind.TYPE_ALIAS,
            type_alias_definition=None if definition is None else str(definition),
        )

    @classmethod
    def enum(cls, name: str) -> "TypeBuilder":
        return cls(name=name, kind=TypeKind.ENUM)

    @classmethod
    def const_enum(cls, name: str) -> "TypeBuilder":
        return cls(name=name, kind=TypeKind.CONST_ENUM)

    # -------------------------------------------------------------------------
    # Modifiers
    # -------------------------------------------------------------------------

    def exported(self) -> "TypeBuilder":
        return replace(self, is_exported=True)

    def default_exported(self) -> "TypeBuilder":
        return replace(self, is_default_export=True)

    def as_abstract(self) -> "TypeBuilder":
        return replace(self, is_abstract=True)

    def as_declare(self) -> "TypeBuilder":
        return replace(self, is_declare=True)

    def with_decorator(self, decorator: str) -> "TypeBuilder":
        return replace(self, decorators=self.decorators + (decorator,))

    def with_js_doc(self, comment: str) -> "TypeBuilder":
        return replace(self, js_doc=comment)

    # -------------------------------------------------------------------------
    # Generics and Inheritance
    # -------------------------------------------------------------------------

    def add_type_parameter(self, name, constraint=None) -> "TypeBuilder":
        return replace(self, type_parameters=self.type_parameters + (type_parameter(name, constraint),))

    def extends(self, base_type) -> "TypeBuilder":
        return replace(self, extends_clause=self.extends_clause + (str(base_type),))

    def implements(self, *interface_names) -> "TypeBuilder":
        names = tuple(str(name) for name in interface_names)
        return replace(self, implements_clause=self.implements_clause + names)

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    def add_field(self, name_or_field, type_=None, configure=None) -> "TypeBuilder":
        """
        Add a field.

        Args:
            name_or_field: A FieldBuilder, or the field name
            type_: Field type when a name is given
            configure: Optional callback applied to the new FieldBuilder
        """
        field = _member(FieldBuilder, name_or_field, type_, configure)
        return replace(self, fields=self.fields + (field,))

    def add_property(self, name_or_property, type_=None, configure=None) -> "TypeBuilder":
        prop = _member(PropertyBuilder, name_or_property, type_, configure)
        return replace(self, properties=self.properties + (prop,))

    def add_method(self, name_or_method, configure=None) -> "TypeBuilder":
        if isinstance(name_or_method, MethodBuilder):
            method = name_or_method
        else:
            method = MethodBuilder.for_(name_or_method)
            if configure is not None:
                method = configure(method)
        return replace(self, methods=self.methods + (method,))

    def add_constructor(self, constructor_or_configure=None) -> "TypeBuilder":
        """Add a constructor, given either a ConstructorBuilder or a configure callback."""
        if isinstance(constructor_or_configure, ConstructorBuilder):
            constructor = constructor_or_configure
        elif constructor_or_configure is None:
            constructor = ConstructorBuilder.create()
        else:
            constructor = constructor_or_configure(ConstructorBuilder.create())
        return replace(self, constructors=self.constructors + (constructor,))

    def add_index_signature(self, key_name: str, key_type, value_type) -> "TypeBuilder":
        signature = f"[{key_name}: {key_type}]: {value_type}"
        return replace(self, index_signatures=self.index_signatures + (signature,))

    def add_nested_type(self, nested_type: "TypeBuilder") -> "TypeBuilder":
        return replace(self, nested_types=self.nested_types + (nested_type,))

    def add_enum_member(self, name: str, value=None) -> "TypeBuilder":
        member = (name, None if value is None else str(value))
        return replace(self, enum_members=self.enum_members + (member,))

    def add_import(self, statement: str) -> "TypeBuilder":
        return replace(self, imports=self.imports + (statement,))

    # -------------------------------------------------------------------------
    # Emit
    # -------------------------------------------------------------------------

    def emit(self, options: Optional["EmitOptions"] = None) -> "OptionalEmit":
        """Render this declaration. See :func:`tsemit.emit.emitter.emit`."""
        from .emitter import emit

        return emit(self, options)


def _member(builder_cls, name_or_member, type_, configure):
    if isinstance(name_or_member, builder_cls):
        return name_or_member
    member = builder_cls.for_(name_or_member, type_)
    if configure is not None:
        member = configure(member)
    return member
