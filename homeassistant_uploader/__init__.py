from .uploader import HomeAssistantUploader

__all__ = ["HomeAssistantUploader"]
