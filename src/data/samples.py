from src.data.basicTypes import Edge


# Literal edge lists used by the graph_algos driver.
# name -> (edges, directed)
SAMPLE_GRAPHS = {
    # Mixed graph with a few cycles and two roots that reach into it
    'dfs_example': (
        [
            Edge(2, 1),
            Edge(1, 3),
            Edge(3, 2),
            Edge(4, 2),
            Edge(4, 3),
            Edge(4, 5),
            Edge(5, 6),
            Edge(6, 7),
            Edge(7, 6),
            Edge(5, 8),
            Edge(8, 4),
            Edge(9, 10),
            Edge(9, 8),
            Edge(10, 8),
        ],
        True,
    ),
    # Four strongly connected components: {1,2,5}, {3,4}, {6,7}, {8}
    'scc_example': (
        [
            Edge(1, 2),
            Edge(2, 3),
            Edge(2, 6),
            Edge(2, 5),
            Edge(3, 4),
            Edge(3, 7),
            Edge(4, 3),
            Edge(4, 8),
            Edge(8, 8),
            Edge(7, 8),
            Edge(7, 6),
            Edge(6, 7),
            Edge(5, 6),
            Edge(5, 1),
        ],
        True,
    ),
    # Weighted DAG, letters when rendered with ID_AS_CHAR (a..f)
    'dag_example': (
        [
            Edge(1, 2, 5),
            Edge(1, 3, 3),
            Edge(2, 3, 2),
            Edge(2, 4, 6),
            Edge(3, 4, 7),
            Edge(3, 5, 4),
            Edge(3, 6, 2),
            Edge(4, 5, 1),
            Edge(4, 6, 1),
            Edge(5, 6, 2),
        ],
        True,
    ),
    'undirected_example': (
        [
            Edge(1, 2),
            Edge(2, 3),
            Edge(3, 1),
            Edge(4, 5),
            Edge(6, 6),
        ],
        False,
    ),
}
