"""Minimum edge cut of an undirected graph and its Graphviz DOT export."""