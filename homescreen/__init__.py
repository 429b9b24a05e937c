"""Home screen CMS backend."""
