from camera.camera import Camera, GenericCamera, OrthographicCamera, PerspectiveCamera

__all__ = ["Camera", "GenericCamera", "OrthographicCamera", "PerspectiveCamera"]
