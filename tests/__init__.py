"""
friendgraph Test Suite

Testing for all friendgraph components including:
- Unit tests for the graph store, each analytics algorithm and the CLI
- Generated graphs and fixtures for reproducible testing

Test organization:
- unit/ - Unit tests for individual components
- fixtures/ - Graph builders shared across tests
"""
