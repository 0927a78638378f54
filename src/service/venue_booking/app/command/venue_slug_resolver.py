from src.service.venue_booking.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_booking.domain.value_object.venue_slug import slugify, with_counter


async def resolve_unique_slug(
    name: str, venue_query_repo: IVenueQueryRepo, *, exclude_venue_id: int | None = None
) -> str:
    """First free slug among base, base-1, base-2, ..."""
    base_slug = slugify(name)
    counter = 0
    while await venue_query_repo.slug_taken(
        with_counter(base_slug, counter), exclude_venue_id=exclude_venue_id
    ):
        counter += 1
    return with_counter(base_slug, counter)
