"""
Rebasing of positional tree paths.

A path is a list of child indices (the empty list being the root). When a document tree is restructured by one of the
structural operations in `treepath.clef`, every stored path must be rewritten so that it keeps pointing at the same
node; `treepath.construct.transform` does exactly that, or returns None if the node is gone.
"""
