"""Terminal UI for the product viewer."""
