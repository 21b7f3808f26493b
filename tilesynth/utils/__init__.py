from .tile_compress import compress_cells, decompress_cells  # noqa: F401

__all__ = ["compress_cells", "decompress_cells"]
