"""Restaurant registry."""

from dataclasses import dataclass

from menu_ranker.domain.providers import Provider


@dataclass(frozen=True)
class RestaurantDescriptor:
    """A restaurant served by one provider.

    The cost center is an opaque code; it keeps leading zeros and is never
    converted to an integer.
    """

    name: str
    cost_center: str
    provider: Provider


DEFAULT_RESTAURANTS: tuple[RestaurantDescriptor, ...] = (
    RestaurantDescriptor(name="Rentukka", cost_center="1416", provider=Provider.SEMMA),
    RestaurantDescriptor(name="Piato", cost_center="1408", provider=Provider.SEMMA),
    RestaurantDescriptor(name="Lozzi", cost_center="1401", provider=Provider.SEMMA),
    RestaurantDescriptor(name="Uno", cost_center="1414", provider=Provider.SEMMA),
    RestaurantDescriptor(name="Syke", cost_center="1405", provider=Provider.SEMMA),
    RestaurantDescriptor(name="Ylistö", cost_center="1403", provider=Provider.SEMMA),
    RestaurantDescriptor(name="Taide", cost_center="0301", provider=Provider.COMPASS),
    RestaurantDescriptor(name="Fiilu", cost_center="3364", provider=Provider.COMPASS),
)
