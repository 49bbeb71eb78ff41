"""Application layer: root controller wiring view models to the catalog."""
