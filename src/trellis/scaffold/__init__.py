"""Project scaffolding pipeline: option resolution, directory checks, dispatch and merge."""
