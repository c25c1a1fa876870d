from umbralux.camera.camera import Camera

__all__ = ["Camera"]
