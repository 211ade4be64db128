from catalog_admin.listener.use_cases.update_media_status import (
    UpdateMediaStatusUseCase,
)

__all__ = ["UpdateMediaStatusUseCase"]
