import matplotlib.colors as mcolors
import matplotlib.pyplot as plt
import networkx as nx

from .graph import ColoringResult, Graph


def _layout(graph, G):
    if any(v.x or v.y for v in graph.vertices):
        return {v.id: (v.x, v.y) for v in graph.vertices}
    return nx.spring_layout(G, seed=42)


def draw_coloring(graph: Graph, result: ColoringResult, ax=None, title=None):
    """Static figure of a coloring; conflicting edges are drawn red."""
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 8))

    G = graph.to_networkx()
    pos = _layout(graph, G)
    coloring = result.colors

    palette_size = max(result.chromatic_number, max(coloring.values(), default=0) + 1, 1)
    color_palette = plt.get_cmap('viridis', palette_size + 5)
    node_colors = [mcolors.to_hex(color_palette(i)) for i in range(palette_size + 5)]

    node_color_list = []
    for node in G.nodes():
        if node in coloring and coloring[node] < len(node_colors):
            node_color_list.append(node_colors[coloring[node]])
        else:
            node_color_list.append('lightgrey')

    edge_colors = ['red' if u in coloring and v in coloring and coloring[u] == coloring[v] else 'black'
                   for u, v in G.edges()]

    nx.draw_networkx_edges(G, pos, edge_color=edge_colors, alpha=0.7, ax=ax)
    if G.number_of_nodes():
        nodes_plot = nx.draw_networkx_nodes(G, pos, node_color=node_color_list, node_size=500, ax=ax)
        nodes_plot.set_edgecolor('black')
        labels = {v.id: v.display_label for v in graph.vertices}
        nx.draw_networkx_labels(G, pos, labels=labels, font_color='black', font_weight='bold', ax=ax)

    if title is None:
        title = f"{result.chromatic_number} colors, {result.conflict_count} conflicts, {result.steps} steps"
    ax.set_title(title, fontsize=14)
    ax.set_axis_off()
    return ax
