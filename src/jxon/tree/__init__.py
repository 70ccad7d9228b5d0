"""Tree subpackage: the XML-element-to-JXON core.

Re-exports the public API for the tree module:
- JxonObject: ordered mapping with a weak parent link
- NodeKind: StrEnum of the four descriptor kinds (ATTRIBUTE, ELEMENT, TEXT, CDATA)
- ChildDescriptor: one classified attribute or child node
- ElementWalker: enumerates an element's attributes and child nodes
- NodeTransformer: recursively converts an element into a JXON value
"""

from jxon.tree.nodes import ChildDescriptor, JxonObject, NodeKind
from jxon.tree.transformer import NodeTransformer
from jxon.tree.walker import ElementWalker

__all__ = ["ChildDescriptor", "ElementWalker", "JxonObject", "NodeKind", "NodeTransformer"]
