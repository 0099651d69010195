"""SVG node tree, attribute bundles and path data encoding."""
