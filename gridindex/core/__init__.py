"""Grid descriptor, coordinate conversion, boundary and neighbor queries."""
