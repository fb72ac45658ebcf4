from src.service.dining.app.dto.booking_with_restaurant import BookingWithRestaurant


__all__ = ['BookingWithRestaurant']
