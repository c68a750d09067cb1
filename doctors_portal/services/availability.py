"""
Open appointment slots per service for one day.

Every service document carries its full daily slot catalog. A slot is open on
a date unless a booking for that service already holds it on that date.
"""

from typing import Any, Dict, Iterable, List, Mapping, Set


def booked_slots(treatment: str, date: str, bookings: Iterable[Mapping[str, Any]]) -> Set[str]:
    """Slots already taken for `treatment` on `date`."""
    return {
        booking.get("slot")
        for booking in bookings
        if booking.get("treatment") == treatment and booking.get("date") == date
    }


def compute_availability(
    date: str,
    services: Iterable[Mapping[str, Any]],
    bookings: Iterable[Mapping[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Annotate each service with the slots still free on `date`.

    `date` is compared as an opaque string; a value that matches no booking
    leaves every service fully available. Bookings for other dates are
    ignored. Slot order follows the service catalog.

    Returns:
        New service dicts; the inputs are left untouched.
    """
    bookings = list(bookings)
    available = []
    for service in services:
        taken = booked_slots(service.get("name"), date, bookings)
        annotated = dict(service)
        annotated["slots"] = [slot for slot in service.get("slots") or [] if slot not in taken]
        available.append(annotated)
    return available
