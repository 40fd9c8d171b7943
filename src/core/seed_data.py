"""Datasets de ejemplo (huéspedes, cabañas y reservas).

Las referencias entre datasets son posicionales: `guest_ref=3` apunta al
tercer huésped de `GUESTS`. Las reservas se declaran relativas a "hoy" y se
materializan con `build_bookings`.
"""

from __future__ import annotations

from datetime import date

from core.domain.models import BookingSeed, BookingTemplate, CabinSeed, GuestSeed

_FLAGS = "https://flagcdn.com"
_IMAGES = "https://cabin-images.local/cabin"

GUESTS: tuple[GuestSeed, ...] = (
    GuestSeed(full_name="Jonas Schmedtmann", email="hello@jonas.io", national_id="3525436345", nationality="Portugal", country_flag=f"{_FLAGS}/pt.svg"),
    GuestSeed(full_name="Jonathan Smith", email="johnsmith@test.eu", national_id="4534593454", nationality="Great Britain", country_flag=f"{_FLAGS}/gb.svg"),
    GuestSeed(full_name="Jonatan Johansson", email="jonatan@example.com", national_id="9374074454", nationality="Finland", country_flag=f"{_FLAGS}/fi.svg"),
    GuestSeed(full_name="Jonas Mueller", email="jonas@example.eu", national_id="1233212288", nationality="Germany", country_flag=f"{_FLAGS}/de.svg"),
    GuestSeed(full_name="Jonas Anderson", email="anderson@example.com", national_id="0988520146", nationality="Bolivia (Plurinational State of)", country_flag=f"{_FLAGS}/bo.svg"),
    GuestSeed(full_name="Jonathan Williams", email="jowi@gmail.com", national_id="633678543", nationality="United States of America", country_flag=f"{_FLAGS}/us.svg"),
    GuestSeed(full_name="Emma Watson", email="emma@gmail.com", national_id="1234578901", nationality="United Kingdom", country_flag=f"{_FLAGS}/gb.svg"),
    GuestSeed(full_name="Mohammed Ali", email="mohammedali@yahoo.com", national_id="987543210", nationality="Egypt", country_flag=f"{_FLAGS}/eg.svg"),
    GuestSeed(full_name="Maria Rodriguez", email="maria@gmail.com", national_id="1357924680", nationality="Spain", country_flag=f"{_FLAGS}/es.svg"),
    GuestSeed(full_name="Li Mei", email="li.mei@hotmail.com", national_id="2468013579", nationality="China", country_flag=f"{_FLAGS}/cn.svg"),
    GuestSeed(full_name="Khadija Ahmed", email="khadija@gmail.com", national_id="9876543210", nationality="Sudan", country_flag=f"{_FLAGS}/sd.svg"),
    GuestSeed(full_name="Gabriel Silva", email="gabriel@gmail.com", national_id="1357913579", nationality="Brazil", country_flag=f"{_FLAGS}/br.svg"),
    GuestSeed(full_name="Maria Gomez", email="maria@example.com", national_id="108642097", nationality="Mexico", country_flag=f"{_FLAGS}/mx.svg"),
    GuestSeed(full_name="Ahmed Hassan", email="ahmed@gmail.com", national_id="1010101010", nationality="Egypt", country_flag=f"{_FLAGS}/eg.svg"),
    GuestSeed(full_name="John Doe", email="johndoe@gmail.com", national_id="9999999999", nationality="United States", country_flag=f"{_FLAGS}/us.svg"),
)

CABINS: tuple[CabinSeed, ...] = (
    CabinSeed(name="001", max_capacity=2, regular_price=250, discount=0, image=f"{_IMAGES}-001.jpg",
              description="Discover the ultimate luxury getaway for couples in this cozy wooden cabin 001."),
    CabinSeed(name="002", max_capacity=2, regular_price=350, discount=25, image=f"{_IMAGES}-002.jpg",
              description="Escape to the serenity of nature and indulge in luxury in our cozy cabin 002."),
    CabinSeed(name="003", max_capacity=4, regular_price=300, discount=0, image=f"{_IMAGES}-003.jpg",
              description="Experience the beauty of nature in our luxury cabin 003, perfect for small families."),
    CabinSeed(name="004", max_capacity=4, regular_price=500, discount=50, image=f"{_IMAGES}-004.jpg",
              description="Indulge in the ultimate luxury family vacation in this wooden cabin 004."),
    CabinSeed(name="005", max_capacity=6, regular_price=350, discount=0, image=f"{_IMAGES}-005.jpg",
              description="Enjoy a comfortable and cozy getaway with your group in our spacious cabin 005."),
    CabinSeed(name="006", max_capacity=6, regular_price=800, discount=100, image=f"{_IMAGES}-006.jpg",
              description="Experience the epitome of luxury with your group or family in cabin 006."),
    CabinSeed(name="007", max_capacity=8, regular_price=600, discount=100, image=f"{_IMAGES}-007.jpg",
              description="Accommodate your large group or multiple families in the spacious cabin 007."),
    CabinSeed(name="008", max_capacity=10, regular_price=1400, discount=0, image=f"{_IMAGES}-008.jpg",
              description="Experience the epitome of luxury in our grand cabin 008, for up to 10 guests."),
)

BOOKING_TEMPLATES: tuple[BookingTemplate, ...] = (
    # Cabin 001
    BookingTemplate(created_offset=-20, start_offset=0, end_offset=7, num_guests=1, has_breakfast=True,
                    is_paid=False, observations="I have a gluten allergy and would like to request a gluten-free breakfast.",
                    guest_ref=2, cabin_ref=1),
    BookingTemplate(created_offset=-33, start_offset=-23, end_offset=-13, num_guests=2, has_breakfast=True,
                    is_paid=True, guest_ref=3, cabin_ref=1),
    BookingTemplate(created_offset=-27, start_offset=12, end_offset=18, num_guests=2, has_breakfast=False,
                    is_paid=False, guest_ref=4, cabin_ref=1),
    # Cabin 002
    BookingTemplate(created_offset=-45, start_offset=-45, end_offset=-29, num_guests=2, has_breakfast=False,
                    is_paid=True, guest_ref=5, cabin_ref=2),
    BookingTemplate(created_offset=-2, start_offset=15, end_offset=18, num_guests=2, has_breakfast=True,
                    is_paid=True, guest_ref=6, cabin_ref=2),
    BookingTemplate(created_offset=-5, start_offset=33, end_offset=48, num_guests=2, has_breakfast=True,
                    is_paid=False, guest_ref=7, cabin_ref=2),
    # Cabin 003
    BookingTemplate(created_offset=-65, start_offset=-25, end_offset=-20, num_guests=4, has_breakfast=True,
                    is_paid=True, guest_ref=8, cabin_ref=3),
    BookingTemplate(created_offset=-2, start_offset=-2, end_offset=0, num_guests=3, has_breakfast=False,
                    is_paid=True, observations="We are bringing our small dog with us.", guest_ref=9, cabin_ref=3),
    BookingTemplate(created_offset=-14, start_offset=-14, end_offset=-11, num_guests=4, has_breakfast=True,
                    is_paid=True, guest_ref=10, cabin_ref=3),
    # Cabin 004
    BookingTemplate(created_offset=-30, start_offset=-4, end_offset=8, num_guests=4, has_breakfast=True,
                    is_paid=True, guest_ref=11, cabin_ref=4),
    BookingTemplate(created_offset=-1, start_offset=12, end_offset=17, num_guests=4, has_breakfast=False,
                    is_paid=False, guest_ref=12, cabin_ref=4),
    # Cabin 005
    BookingTemplate(created_offset=-3, start_offset=0, end_offset=3, num_guests=6, has_breakfast=True,
                    is_paid=False, observations="We will be bringing our own bikes.", guest_ref=13, cabin_ref=5),
    BookingTemplate(created_offset=-16, start_offset=-16, end_offset=-9, num_guests=5, has_breakfast=False,
                    is_paid=True, guest_ref=14, cabin_ref=5),
    # Cabin 006
    BookingTemplate(created_offset=-18, start_offset=-4, end_offset=-1, num_guests=6, has_breakfast=True,
                    is_paid=True, guest_ref=15, cabin_ref=6),
    BookingTemplate(created_offset=-8, start_offset=5, end_offset=9, num_guests=5, has_breakfast=False,
                    is_paid=False, guest_ref=1, cabin_ref=6),
    # Cabin 007
    BookingTemplate(created_offset=-40, start_offset=-30, end_offset=-23, num_guests=8, has_breakfast=True,
                    is_paid=True, guest_ref=2, cabin_ref=7),
    BookingTemplate(created_offset=-6, start_offset=-1, end_offset=6, num_guests=7, has_breakfast=False,
                    is_paid=True, guest_ref=3, cabin_ref=7),
    # Cabin 008
    BookingTemplate(created_offset=-3, start_offset=-1, end_offset=12, num_guests=10, has_breakfast=True,
                    is_paid=False, observations="We are celebrating a family reunion.", guest_ref=4, cabin_ref=8),
    BookingTemplate(created_offset=-7, start_offset=20, end_offset=24, num_guests=9, has_breakfast=True,
                    is_paid=False, guest_ref=5, cabin_ref=8),
)


def build_bookings(today: date | None = None) -> list[BookingSeed]:
    """Materializa `BOOKING_TEMPLATES` respecto a `today` (por defecto, hoy)."""

    today = today or date.today()
    return [template.materialize(today) for template in BOOKING_TEMPLATES]
