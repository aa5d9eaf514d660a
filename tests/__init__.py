"""
Test suite for PyNoisey package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for samplers, modules, graph specs, the graph builder and CLI
- Integration tests for complete graphs built from configuration

Run with: pytest
"""
