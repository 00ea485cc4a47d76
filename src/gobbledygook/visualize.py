"""Rich rendering of token trees, for inspecting how a string was tokenized."""

from rich.text import Text as RichText
from rich.tree import Tree

from gobbledygook.tokenizer import Container, Marker, Token

TEXT_STYLE = "on #000055"
MARKER_STYLE = "bold black on yellow"
TAG_STYLE = "cyan"


def visualize_tokens(tokens: list[Token], label: str = "tokens") -> Tree:
    """Build a rich Tree showing each token's kind and literal value, nested by container."""
    tree = Tree(RichText(label, style="bold"))
    add_tokens(tree, tokens)
    return tree

def add_tokens(tree: Tree, tokens: list[Token]) -> None:
    for token in tokens:
        if isinstance(token, Container):
            label = RichText.assemble(
                ("container ", "dim"),
                (token.opening, TAG_STYLE),
                " … ",
                (token.closing, TAG_STYLE),
            )
            add_tokens(tree.add(label), token.children)
        elif isinstance(token, Marker):
            tree.add(RichText.assemble(("marker ", "dim"), (token.value, MARKER_STYLE)))
        else:
            tree.add(RichText.assemble(("text ", "dim"), (repr(token.value), TEXT_STYLE)))
