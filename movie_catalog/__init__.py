"""Movie catalog persistence layer.

Genre and Movie entities stored in a relational database, with
repositories for listing, lookup and insertion.
"""

__version__ = "0.1.0"
