from enum import Enum


class EventType(str, Enum):
    CONFERENCE = "conference"
    CORPORATE_MEETING = "corporate-meeting"
    TRADE_SHOW = "trade-show"
    WORKSHOP = "workshop"
    GALA = "gala"
    PRODUCT_LAUNCH = "product-launch"
    TRAINING = "training"
    NETWORKING = "networking"


class EventFormat(str, Enum):
    IN_PERSON = "in-person"
    VIRTUAL = "virtual"
    HYBRID = "hybrid"


class EventScale(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    MEGA = "mega"


class VenueType(str, Enum):
    CONVENTION_CENTER = "convention-center"
    HOTEL = "hotel"
    CORPORATE_OFFICE = "corporate-office"
    OUTDOOR = "outdoor"
    HYBRID_SPACE = "hybrid-space"
    UNIQUE_VENUE = "unique-venue"


class VenueSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"


class EnergySource(str, Enum):
    GRID_STANDARD = "grid-standard"
    GRID_RENEWABLE = "grid-renewable"
    ONSITE_SOLAR = "onsite-solar"
    ONSITE_WIND = "onsite-wind"
    MIXED_RENEWABLE = "mixed-renewable"
    CARBON_NEUTRAL = "carbon-neutral"

    @property
    def is_renewable(self) -> bool:
        return self is not EnergySource.GRID_STANDARD


class TransitAccess(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    LIMITED = "limited"
    NONE = "none"


class TravelMode(str, Enum):
    AIR_SHORT = "air-short"
    AIR_MEDIUM = "air-medium"
    AIR_LONG = "air-long"
    TRAIN = "train"
    CAR = "car"
    BUS = "bus"
    LOCAL = "local"

    @property
    def is_air(self) -> bool:
        return self in (TravelMode.AIR_SHORT, TravelMode.AIR_MEDIUM, TravelMode.AIR_LONG)

    @property
    def is_public_transit(self) -> bool:
        return self in (TravelMode.TRAIN, TravelMode.BUS, TravelMode.LOCAL)


class AttendeeRegion(str, Enum):
    LOCAL = "local"
    DOMESTIC = "domestic"
    CONTINENTAL = "continental"
    INTERNATIONAL = "international"


class MealType(str, Enum):
    FULL_MEAT = "full-meat"
    MIXED_MEAT_VEG = "mixed-meat-veg"
    PESCATARIAN = "pescatarian"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    LOCAL_ORGANIC = "local-organic"


class BeverageOption(str, Enum):
    STANDARD = "standard"
    LOCAL_CRAFT = "local-craft"
    ORGANIC = "organic"
    MINIMAL = "minimal"


class MaterialLevel(str, Enum):
    STANDARD = "standard"
    REDUCED = "reduced"
    DIGITAL_FIRST = "digital-first"
    ZERO_WASTE = "zero-waste"


class DecorationLevel(str, Enum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    EXTENSIVE = "extensive"


class WasteManagement(str, Enum):
    NONE = "none"
    RECYCLING = "recycling"
    COMPOSTING = "composting"
    ZERO_WASTE = "zero-waste"


class PlatformType(str, Enum):
    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class Region(str, Enum):
    US = "us"
    EU = "eu"
    UK = "uk"
    CA = "ca"
    AU = "au"


class AdoptionTier(str, Enum):
    BASIC = "basic"
    MODERATE = "moderate"
    ADVANCED = "advanced"
    COMPREHENSIVE = "comprehensive"


class ImpactCategory(str, Enum):
    """Carbon breakdown categories, in tie-break order."""

    VENUE = "venue"
    FOOD_BEVERAGE = "food_beverage"
    TRANSPORT = "transport"
    MATERIALS = "materials"


class CostCategory(str, Enum):
    VENUE = "venue"
    ENERGY = "energy"
    CATERING = "catering"
    TRANSPORT = "transport"
    MATERIALS = "materials"
    WASTE = "waste"


class IncentiveCategory(str, Enum):
    ENERGY = "energy"
    WASTE = "waste"
    CARBON = "carbon"
    GENERAL = "general"


class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class IndustryComparison(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    BELOW_AVERAGE = "below-average"
    POOR = "poor"


class OffsetTier(str, Enum):
    VOLUNTARY = "voluntary"
    GOLD_STANDARD = "gold-standard"
    VERIFIED = "verified"
    PREMIUM = "premium"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class CostDirection(str, Enum):
    LOWER = "lower"
    SAME = "same"
    HIGHER = "higher"
