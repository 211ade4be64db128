from catalog_admin.listener.repositories.video_repository import VideoRepository

__all__ = ["VideoRepository"]
