"""
Représentation intermédiaire (IR) commune aux deux générateurs.

Chaque bloc est traduit une seule fois en BlockIR (styles résolus + arbre de nœuds) ;
le renderer HTML et le renderer composant ne font que parcourir cet arbre.
Le nombre de sections et les valeurs de style sont donc identiques par construction.

Nœuds :
  Element  balise + classes + style + attributs + enfants (ou HTML de confiance)
  Text     texte (littéral ou expression), toujours échappé
  Each     rendu de liste (littéral JSON ou champ d'un élément parent)
  When     condition sur un champ d'élément

Expressions (évaluées en Python côté HTML, traduites en JS côté composant) :
  Ref, Eq, Pick, Stars
"""
import json
from abc import abstractmethod
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ..core.schemas import StudioModel


# ── Expressions ─────────────────────────────────────────────────────────────

class Expr(StudioModel):
    """Base abstraite : valeur calculée à partir des éléments de liste en cours (scope)."""

    @abstractmethod
    def evaluate(self, scope: Dict[str, Any]) -> Any: ...

    @abstractmethod
    def to_js(self) -> str: ...


class Ref(Expr):
    """var, var.field, ou (var.field || fallback)."""
    var: str
    field: Optional[str] = None
    fallback: Any = None

    def evaluate(self, scope):
        value = scope[self.var]
        if self.field:
            value = getattr(value, self.field)
        if self.fallback is not None:
            value = value or self.fallback
        return value

    def to_js(self) -> str:
        js = f"{self.var}.{to_camel(self.field)}" if self.field else self.var
        if self.fallback is not None:
            js = f"({js} || {js_literal(self.fallback)})"
        return js


class Eq(Expr):
    ref: Ref
    value: Any

    def evaluate(self, scope):
        return self.ref.evaluate(scope) == self.value

    def to_js(self) -> str:
        return f"{self.ref.to_js()} === {js_literal(self.value)}"


class Pick(Expr):
    """Valeur conditionnelle : then si test, sinon otherwise."""
    test: Union[Eq, Ref]
    then: Any
    otherwise: Any

    def evaluate(self, scope):
        return evaluate(self.then if self.test.evaluate(scope) else self.otherwise, scope)

    def to_js(self) -> str:
        return f"({self.test.to_js()} ? {to_js(self.then)} : {to_js(self.otherwise)})"


class Stars(Expr):
    """Note → glyphes ★/☆ (note absente ou nulle = note maximale)."""
    ref: Ref
    total: int = 5

    def evaluate(self, scope):
        n = max(0, min(self.total, int(self.ref.evaluate(scope) or self.total)))
        return "★" * n + "☆" * (self.total - n)

    def to_js(self) -> str:
        n = f"Math.max(0, Math.min({self.total}, {self.ref.to_js()} || {self.total}))"
        return f"'★'.repeat({n}) + '☆'.repeat({self.total} - {n})"


def evaluate(value: Any, scope: Dict[str, Any]) -> Any:
    return value.evaluate(scope) if isinstance(value, Expr) else value


def to_js(value: Any) -> str:
    return value.to_js() if isinstance(value, Expr) else js_literal(value)


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def js_literal(value: Any) -> str:
    """Littéral JSON (les éléments de liste sont sérialisés en camelCase)."""
    return json.dumps(_plain(value), ensure_ascii=False)


# ── Nœuds ───────────────────────────────────────────────────────────────────

class Text(StudioModel):
    value: Any = ""


class Element(StudioModel):
    tag: str
    classes: str = ""
    children: List["Node"] = []
    style: Dict[str, Any] = {}
    attrs: Dict[str, Any] = {}
    raw_html: Any = None  # HTML de confiance, jamais échappé


class Each(StudioModel):
    source: Any            # liste littérale ou Ref vers une liste imbriquée
    var: str
    body: "Node"
    index: str = "i"


class When(StudioModel):
    test: Union[Eq, Ref]
    body: "Node"
    otherwise: Optional["Node"] = None


Node = Union[Element, Text, Each, When]

Element.model_rebuild()
Each.model_rebuild()
When.model_rebuild()


def el(tag: str, classes: str = "", *children, style=None, attrs=None, raw_html=None) -> Element:
    """
    Raccourci de construction. Les enfants str deviennent des Text ;
    None / False / "" sont ignorés (branches conditionnelles au niveau du bloc).
    """
    nodes = []
    for child in children:
        if child is None or child is False or child == "":
            continue
        nodes.append(child if isinstance(child, (Element, Text, Each, When)) else Text(value=child))
    return Element(
        tag=tag, classes=classes, children=nodes,
        style=style or {}, attrs=attrs or {}, raw_html=raw_html,
    )


# ── Bloc ────────────────────────────────────────────────────────────────────

class BlockIR(StudioModel):
    """Bloc résolu : valeurs de style finales + contenu."""
    block_type: str
    instance_id: Optional[str] = None
    anchor_id: Optional[str] = None
    background: Dict[str, str] = {}
    padding_top: str
    padding_bottom: str
    animation: str = ""
    radius: Optional[str] = None
    content: Node

    @property
    def section_classes(self) -> str:
        return " ".join(c for c in (self.padding_top, self.padding_bottom, self.animation) if c)
