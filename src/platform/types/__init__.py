from src.platform.types.object_id_types import ObjectIdStr, is_object_id_hex


__all__ = ['ObjectIdStr', 'is_object_id_hex']
