from gittree.models.base import GitObject, ObjectType
from gittree.models.blob import Blob
from gittree.models.reference import Reference
from gittree.models.tree import Tree, TreeEntry

__all__ = ["GitObject", "ObjectType", "Blob", "Reference", "Tree", "TreeEntry"]
