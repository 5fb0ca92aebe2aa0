"""Quadtree implementation for spatial lookups of roads and buildings on the screen plane."""
from typing import Generic, List, Optional, TypeVar

from citydesigner.citygen.dataclass import Bounds

T = TypeVar('T')


class QuadTree(Generic[T]):
    """Quadtree data structure for spatial partitioning and querying.

    A quadtree recursively divides the screen into four quadrants so that a
    collision query only has to look at the items stored near the query box.
    An item whose bounds straddle a split line is stored in every quadrant it
    touches; queries remove those duplicates.

    Attributes:
        bounds: The spatial bounds of this quadtree node.
        max_objects: Maximum number of objects before splitting.
        max_levels: Maximum depth of the quadtree.
        level: Current depth level of this node.
        objects: List of object bounds in this node.
        items: List of items corresponding to the bounds.
        nodes: Child nodes of this quadtree.
    """

    def __init__(self, bounds: Bounds, max_objects=10, max_levels=4, level=0):
        """Initialize a new quadtree node.

        Args:
            bounds: The spatial bounds of this quadtree node.
            max_objects: Maximum number of objects before splitting.
            max_levels: Maximum depth of the quadtree.
            level: Current depth level of this node.
        """
        self.bounds = bounds
        self.max_objects = max_objects
        self.max_levels = max_levels
        self.level = level
        self.objects: List[Bounds] = []
        self.items: List[T] = []
        self.nodes: List[Optional['QuadTree[T]']] = [None] * 4

    def is_split(self) -> bool:
        """Return True once this node has been divided into children."""
        return self.nodes[0] is not None

    def split(self):
        """Split this node into four child nodes and push its objects down."""
        width = self.bounds.width / 2
        height = self.bounds.height / 2
        x = self.bounds.x
        y = self.bounds.y

        quadrants = [
            Bounds(x + width, y, width, height),
            Bounds(x, y, width, height),
            Bounds(x, y + height, width, height),
            Bounds(x + width, y + height, width, height),
        ]
        self.nodes = [
            QuadTree(quadrant, self.max_objects, self.max_levels, self.level + 1)
            for quadrant in quadrants
        ]

        objects, items = self.objects, self.items
        self.objects, self.items = [], []
        for rect, item in zip(objects, items):
            for node in self.get_relevant_nodes(rect):
                node.insert(rect, item)

    def get_relevant_nodes(self, rect: Bounds) -> List['QuadTree[T]']:
        """Get the child nodes that intersect with the given rectangle.

        Args:
            rect: The bounding rectangle to test intersection with.

        Returns:
            List of child nodes that intersect with the rectangle.
        """
        nodes = []
        mid_x = self.bounds.x + self.bounds.width / 2
        mid_y = self.bounds.y + self.bounds.height / 2

        top = rect.y <= mid_y
        bottom = rect.y + rect.height > mid_y

        if rect.x <= mid_x:
            if top:
                nodes.append(self.nodes[1])
            if bottom:
                nodes.append(self.nodes[2])
        if rect.x + rect.width > mid_x:
            if top:
                nodes.append(self.nodes[0])
            if bottom:
                nodes.append(self.nodes[3])
        return [n for n in nodes if n is not None]

    def insert(self, rect: Bounds, item: T):
        """Insert an item with its bounds into the quadtree.

        Args:
            rect: The bounding rectangle of the item.
            item: The item to insert.
        """
        if self.is_split():
            for node in self.get_relevant_nodes(rect):
                node.insert(rect, item)
            return
        self.objects.append(rect)
        self.items.append(item)

        if len(self.objects) > self.max_objects and self.level < self.max_levels:
            self.split()

    def retrieve(self, rect: Bounds) -> List[T]:
        """Retrieve all items stored in the quadrants touched by the rectangle.

        The result is a superset of the items that actually intersect ``rect``;
        callers run their exact test on it.

        Args:
            rect: The bounding rectangle to query.

        Returns:
            List of candidate items, each at most once, in insertion order per leaf.
        """
        result: List[T] = []
        seen = set()
        for item in self._collect(rect):
            if id(item) not in seen:
                seen.add(id(item))
                result.append(item)
        return result

    def _collect(self, rect: Bounds) -> List[T]:
        if not self.is_split():
            return list(self.items)
        result = []
        for node in self.get_relevant_nodes(rect):
            result.extend(node._collect(rect))
        return result

    def retrieve_exact(self, query_rect: Bounds) -> List[T]:
        """Retrieve all items whose stored bounds intersect the given rectangle.

        Args:
            query_rect: The bounding rectangle to query.

        Returns:
            List of items that intersect with the rectangle.
        """
        result = []
        seen = set()
        for rect, item in self._collect_pairs(query_rect):
            if id(item) in seen:
                continue
            if query_rect.intersects(rect):
                seen.add(id(item))
                result.append(item)
        return result

    def _collect_pairs(self, rect: Bounds):
        if not self.is_split():
            return list(zip(self.objects, self.items))
        pairs = []
        for node in self.get_relevant_nodes(rect):
            pairs.extend(node._collect_pairs(rect))
        return pairs

    def clear(self):
        """Clear the quadtree, removing all items and resetting to initial state."""
        self.objects = []
        self.items = []
        self.nodes = [None] * 4

    def __len__(self):
        """Return the number of distinct items stored in the tree."""
        return len({id(item) for _, item in self._collect_pairs(self.bounds)})
