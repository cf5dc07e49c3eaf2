"""HTTP service over the pipeline core and workspaces."""
