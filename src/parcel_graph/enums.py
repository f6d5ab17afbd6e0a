from __future__ import annotations

from enum import StrEnum
from typing import List, Type


# Member order is significant: the enum matcher scans members in
# declaration order when falling back to containment matching.


class PropertyType(StrEnum):
    LAND_PARCEL = "LandParcel"
    BUILDING = "Building"
    UNIT = "Unit"
    MANUFACTURED_HOME = "ManufacturedHome"


class PropertyUsageType(StrEnum):
    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"
    AGRICULTURAL = "Agricultural"
    RECREATIONAL = "Recreational"
    CONSERVATION = "Conservation"
    RETIREMENT = "Retirement"
    RESIDENTIAL_COMMON_ELEMENTS_AREAS = "ResidentialCommonElementsAreas"
    DRYLAND_CROPLAND = "DrylandCropland"
    HAY_MEADOW = "HayMeadow"
    CROPLAND_CLASS2 = "CroplandClass2"
    CROPLAND_CLASS3 = "CroplandClass3"
    TIMBER_LAND = "TimberLand"
    GRAZING_LAND = "GrazingLand"
    ORCHARD_GROVES = "OrchardGroves"
    POULTRY = "Poultry"
    ORNAMENTALS = "Ornamentals"
    CHURCH = "Church"
    PRIVATE_SCHOOL = "PrivateSchool"
    PRIVATE_HOSPITAL = "PrivateHospital"
    HOMES_FOR_AGED = "HomesForAged"
    NON_PROFIT_CHARITY = "NonProfitCharity"
    MORTUARY_CEMETERY = "MortuaryCemetery"
    CLUBS_LODGES = "ClubsLodges"
    SANITARIUM_CONVALESCENT_HOME = "SanitariumConvalescentHome"
    CULTURAL_ORGANIZATION = "CulturalOrganization"
    MILITARY = "Military"
    FOREST_PARK_RECREATION = "ForestParkRecreation"
    PUBLIC_SCHOOL = "PublicSchool"
    PUBLIC_HOSPITAL = "PublicHospital"
    GOVERNMENT_PROPERTY = "GovernmentProperty"
    RETAIL_STORE = "RetailStore"
    DEPARTMENT_STORE = "DepartmentStore"
    SUPERMARKET = "Supermarket"
    SHOPPING_CENTER_REGIONAL = "ShoppingCenterRegional"
    SHOPPING_CENTER_COMMUNITY = "ShoppingCenterCommunity"
    OFFICE_BUILDING = "OfficeBuilding"
    MEDICAL_OFFICE = "MedicalOffice"
    TRANSPORTATION_TERMINAL = "TransportationTerminal"
    RESTAURANT = "Restaurant"
    FINANCIAL_INSTITUTION = "FinancialInstitution"
    SERVICE_STATION = "ServiceStation"
    AUTO_SALES_REPAIR = "AutoSalesRepair"
    MOBILE_HOME_PARK = "MobileHomePark"
    WHOLESALE_OUTLET = "WholesaleOutlet"
    THEATER = "Theater"
    ENTERTAINMENT = "Entertainment"
    HOTEL = "Hotel"
    RACE_TRACK = "RaceTrack"
    GOLF_COURSE = "GolfCourse"
    LIGHT_MANUFACTURING = "LightManufacturing"
    HEAVY_MANUFACTURING = "HeavyManufacturing"
    LUMBER_YARD = "LumberYard"
    PACKING_PLANT = "PackingPlant"
    CANNERY = "Cannery"
    MINERAL_PROCESSING = "MineralProcessing"
    WAREHOUSE = "Warehouse"
    OPEN_STORAGE = "OpenStorage"
    UTILITY = "Utility"
    RIVERS_LAKES = "RiversLakes"
    SEWAGE_DISPOSAL = "SewageDisposal"
    RAILROAD = "Railroad"
    TRANSITIONAL_PROPERTY = "TransitionalProperty"
    REFERENCE_PARCEL = "ReferenceParcel"
    NURSERY_GREENHOUSE = "NurseryGreenhouse"
    AGRICULTURAL_PACKING_FACILITY = "AgriculturalPackingFacility"
    LIVESTOCK_FACILITY = "LivestockFacility"
    AQUACULTURE = "Aquaculture"
    VINEYARD_WINERY = "VineyardWinery"
    DATA_CENTER = "DataCenter"
    TELECOMMUNICATIONS_FACILITY = "TelecommunicationsFacility"
    SOLAR_FARM = "SolarFarm"
    WIND_FARM = "WindFarm"
    NATIVE_PASTURE = "NativePasture"
    IMPROVED_PASTURE = "ImprovedPasture"
    RANGELAND = "Rangeland"
    PASTURE_WITH_TIMBER = "PastureWithTimber"
    UNKNOWN = "Unknown"


class OwnershipEstateType(StrEnum):
    CONDOMINIUM = "Condominium"
    COOPERATIVE = "Cooperative"
    LIFE_ESTATE = "LifeEstate"
    TIMESHARE = "Timeshare"
    OTHER_ESTATE = "OtherEstate"
    FEE_SIMPLE = "FeeSimple"
    LEASEHOLD = "Leasehold"
    RIGHT_OF_WAY = "RightOfWay"
    NON_WARRANTABLE_CONDO = "NonWarrantableCondo"
    SUBSURFACE_RIGHTS = "SubsurfaceRights"


class StructureForm(StrEnum):
    SINGLE_FAMILY_DETACHED = "SingleFamilyDetached"
    SINGLE_FAMILY_SEMI_DETACHED = "SingleFamilySemiDetached"
    TOWNHOUSE_ROWHOUSE = "TownhouseRowhouse"
    DUPLEX = "Duplex"
    TRIPLEX = "Triplex"
    QUADPLEX = "Quadplex"
    MULTI_FAMILY_5_PLUS = "MultiFamily5Plus"
    APARTMENT_UNIT = "ApartmentUnit"
    LOFT = "Loft"
    MANUFACTURED_HOME_ON_LAND = "ManufacturedHomeOnLand"
    MANUFACTURED_HOME_IN_PARK = "ManufacturedHomeInPark"
    MULTI_FAMILY_MORE_THAN_10 = "MultiFamilyMoreThan10"
    MULTI_FAMILY_LESS_THAN_10 = "MultiFamilyLessThan10"
    MOBILE_HOME = "MobileHome"
    MANUFACTURED_HOUSING_MULTI_WIDE = "ManufacturedHousingMultiWide"
    MANUFACTURED_HOUSING = "ManufacturedHousing"
    MANUFACTURED_HOUSING_SINGLE_WIDE = "ManufacturedHousingSingleWide"
    MODULAR = "Modular"


class BuildStatus(StrEnum):
    VACANT_LAND = "VacantLand"
    IMPROVED = "Improved"
    UNDER_CONSTRUCTION = "UnderConstruction"


class NumberOfUnitsType(StrEnum):
    ONE = "One"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    ONE_TO_FOUR = "OneToFour"
    TWO_TO_FOUR = "TwoToFour"


class ExteriorWallMaterial(StrEnum):
    BRICK = "Brick"
    NATURAL_STONE = "Natural Stone"
    MANUFACTURED_STONE = "Manufactured Stone"
    STUCCO = "Stucco"
    VINYL_SIDING = "Vinyl Siding"
    WOOD_SIDING = "Wood Siding"
    FIBER_CEMENT_SIDING = "Fiber Cement Siding"
    METAL_SIDING = "Metal Siding"
    CONCRETE_BLOCK = "Concrete Block"
    EIFS = "EIFS"
    LOG = "Log"
    ADOBE = "Adobe"
    PRECAST_CONCRETE = "Precast Concrete"
    CURTAIN_WALL = "Curtain Wall"


class ExteriorWallAccentMaterial(StrEnum):
    BRICK_ACCENT = "Brick Accent"
    STONE_ACCENT = "Stone Accent"
    WOOD_TRIM = "Wood Trim"
    METAL_TRIM = "Metal Trim"
    STUCCO_ACCENT = "Stucco Accent"
    VINYL_ACCENT = "Vinyl Accent"
    DECORATIVE_BLOCK = "Decorative Block"


class PrimaryFramingMaterial(StrEnum):
    WOOD_FRAME = "Wood Frame"
    STEEL_FRAME = "Steel Frame"
    CONCRETE_BLOCK = "Concrete Block"
    POURED_CONCRETE = "Poured Concrete"
    MASONRY = "Masonry"
    ENGINEERED_LUMBER = "Engineered Lumber"
    POST_AND_BEAM = "Post and Beam"
    LOG_CONSTRUCTION = "Log Construction"


class RoofCoveringMaterial(StrEnum):
    ARCHITECTURAL_ASPHALT_SHINGLE = "Architectural Asphalt Shingle"
    THREE_TAB_ASPHALT_SHINGLE = "3-Tab Asphalt Shingle"
    METAL_STANDING_SEAM = "Metal Standing Seam"
    METAL_CORRUGATED = "Metal Corrugated"
    CLAY_TILE = "Clay Tile"
    CONCRETE_TILE = "Concrete Tile"
    NATURAL_SLATE = "Natural Slate"
    SYNTHETIC_SLATE = "Synthetic Slate"
    WOOD_SHAKE = "Wood Shake"
    WOOD_SHINGLE = "Wood Shingle"
    TPO_MEMBRANE = "TPO Membrane"
    EPDM_MEMBRANE = "EPDM Membrane"
    MODIFIED_BITUMEN = "Modified Bitumen"
    BUILT_UP_ROOF = "Built-Up Roof"
    GREEN_ROOF_SYSTEM = "Green Roof System"
    SOLAR_INTEGRATED_TILES = "Solar Integrated Tiles"


class RoofMaterialType(StrEnum):
    MANUFACTURED = "Manufactured"
    STONE = "Stone"
    WOOD = "Wood"
    SHINGLE = "Shingle"
    COMPOSITION = "Composition"
    METAL = "Metal"
    CERAMIC_TILE = "CeramicTile"
    CONCRETE = "Concrete"
    TILE = "Tile"


class RoofDesignType(StrEnum):
    GABLE = "Gable"
    HIP = "Hip"
    FLAT = "Flat"
    MANSARD = "Mansard"
    GAMBREL = "Gambrel"
    SHED = "Shed"
    SALTBOX = "Saltbox"
    BUTTERFLY = "Butterfly"
    BONNET = "Bonnet"
    CLERESTORY = "Clerestory"
    DOME = "Dome"
    BARREL = "Barrel"
    COMBINATION = "Combination"


class FlooringMaterial(StrEnum):
    SOLID_HARDWOOD = "Solid Hardwood"
    ENGINEERED_HARDWOOD = "Engineered Hardwood"
    LAMINATE = "Laminate"
    LUXURY_VINYL_PLANK = "Luxury Vinyl Plank"
    SHEET_VINYL = "Sheet Vinyl"
    CERAMIC_TILE = "Ceramic Tile"
    PORCELAIN_TILE = "Porcelain Tile"
    STONE = "Stone"
    CARPET = "Carpet"
    AREA_RUGS = "Area Rugs"
    POLISHED_CONCRETE = "Polished Concrete"
    BAMBOO = "Bamboo"
    CORK = "Cork"
    LINOLEUM = "Linoleum"
    TERRAZZO = "Terrazzo"
    EPOXY_COATING = "Epoxy Coating"
    CONCRETE = "Concrete"


class InteriorWallSurfaceMaterial(StrEnum):
    DRYWALL = "Drywall"
    PLASTER = "Plaster"
    WOOD_PANELING = "Wood Paneling"
    EXPOSED_BRICK = "Exposed Brick"
    EXPOSED_BLOCK = "Exposed Block"
    WAINSCOTING = "Wainscoting"
    SHIPLAP = "Shiplap"
    BOARD_AND_BATTEN = "Board and Batten"
    TILE = "Tile"
    STONE_VENEER = "Stone Veneer"
    METAL_PANELS = "Metal Panels"
    GLASS_PANELS = "Glass Panels"


class FoundationType(StrEnum):
    SLAB_ON_GRADE = "Slab on Grade"
    CRAWL_SPACE = "Crawl Space"
    FULL_BASEMENT = "Full Basement"
    PARTIAL_BASEMENT = "Partial Basement"
    PIER_AND_BEAM = "Pier and Beam"
    BASEMENT_WITH_WALKOUT = "Basement with Walkout"
    STEM_WALL = "Stem Wall"


class AttachmentType(StrEnum):
    ATTACHED = "Attached"
    SEMI_DETACHED = "SemiDetached"
    DETACHED = "Detached"


class CoolingSystemType(StrEnum):
    CENTRAL_AIR = "CentralAir"
    DUCTLESS = "Ductless"
    HYBRID = "Hybrid"
    CEILING_FANS = "CeilingFans"
    FAN = "Fan"
    WHOLE_HOUSE_FAN = "WholeHouseFan"
    WINDOW_AIR_CONDITIONER = "WindowAirConditioner"
    GEOTHERMAL_COOLING = "GeothermalCooling"
    ZONED = "Zoned"
    ELECTRIC = "Electric"


class HeatingSystemType(StrEnum):
    ELECTRIC_FURNACE = "ElectricFurnace"
    ELECTRIC = "Electric"
    GAS_FURNACE = "GasFurnace"
    DUCTLESS = "Ductless"
    RADIANT = "Radiant"
    SOLAR = "Solar"
    HEAT_PUMP = "HeatPump"
    CENTRAL = "Central"
    BASEBOARD = "Baseboard"
    GAS = "Gas"


class HeatingFuelType(StrEnum):
    ELECTRIC = "Electric"
    NATURAL_GAS = "NaturalGas"
    PROPANE = "Propane"
    OIL = "Oil"
    KEROSENE = "Kerosene"
    WOOD_PELLET = "WoodPellet"
    WOOD = "Wood"
    GEOTHERMAL = "Geothermal"
    SOLAR = "Solar"
    DISTRICT_STEAM = "DistrictSteam"
    OTHER = "Other"


class SewerType(StrEnum):
    PUBLIC = "Public"
    SEPTIC = "Septic"
    SANITARY = "Sanitary"
    COMBINED = "Combined"


class WaterSourceType(StrEnum):
    PUBLIC = "Public"
    WELL = "Well"
    AQUIFER = "Aquifer"


class SpaceType(StrEnum):
    BUILDING = "Building"
    LIVING_ROOM = "Living Room"
    FAMILY_ROOM = "Family Room"
    GREAT_ROOM = "Great Room"
    DINING_ROOM = "Dining Room"
    OFFICE_ROOM = "Office Room"
    CONFERENCE_ROOM = "Conference Room"
    CLASS_ROOM = "Class Room"
    PLANT_FLOOR = "Plant Floor"
    KITCHEN = "Kitchen"
    BREAKFAST_NOOK = "Breakfast Nook"
    PANTRY = "Pantry"
    PRIMARY_BEDROOM = "Primary Bedroom"
    SECONDARY_BEDROOM = "Secondary Bedroom"
    GUEST_BEDROOM = "Guest Bedroom"
    CHILDRENS_BEDROOM = "Children’s Bedroom"
    NURSERY = "Nursery"
    FULL_BATHROOM = "Full Bathroom"
    THREE_QUARTER_BATHROOM = "Three-Quarter Bathroom"
    HALF_BATHROOM = "Half Bathroom / Powder Room"
    EN_SUITE_BATHROOM = "En-Suite Bathroom"
    JACK_AND_JILL_BATHROOM = "Jack-and-Jill Bathroom"
    PRIMARY_BATHROOM = "Primary Bathroom"
    LAUNDRY_ROOM = "Laundry Room"
    MUDROOM = "Mudroom"
    CLOSET = "Closet"
    BEDROOM = "Bedroom"
    WALK_IN_CLOSET = "Walk-in Closet"
    MECHANICAL_ROOM = "Mechanical Room"
    STORAGE_ROOM = "Storage Room"
    SERVER_IT_CLOSET = "Server/IT Closet"
    HOME_OFFICE = "Home Office"
    LIBRARY = "Library"
    DEN = "Den"
    STUDY = "Study"
    MEDIA_ROOM = "Media Room / Home Theater"
    GAME_ROOM = "Game Room"
    HOME_GYM = "Home Gym"
    MUSIC_ROOM = "Music Room"
    CRAFT_ROOM = "Craft Room / Hobby Room"
    PRAYER_ROOM = "Prayer Room / Meditation Room"
    SAFE_ROOM = "Safe Room / Panic Room"
    WINE_CELLAR = "Wine Cellar"
    BAR_AREA = "Bar Area"
    GREENHOUSE = "Greenhouse"
    ATTACHED_GARAGE = "Attached Garage"
    DETACHED_GARAGE = "Detached Garage"
    CARPORT = "Carport"
    WORKSHOP = "Workshop"
    STORAGE_LOFT = "Storage Loft"
    PORCH = "Porch"
    SCREENED_PORCH = "Screened Porch"
    SUNROOM = "Sunroom"
    DECK = "Deck"
    PATIO = "Patio"
    PERGOLA = "Pergola"
    BALCONY = "Balcony"
    TERRACE = "Terrace"
    GAZEBO = "Gazebo"
    POOL_HOUSE = "Pool House"
    OUTDOOR_KITCHEN = "Outdoor Kitchen"
    LOBBY = "Lobby / Entry Hall"
    COMMON_ROOM = "Common Room"
    UTILITY_CLOSET = "Utility Closet"
    ELEVATOR_LOBBY = "Elevator Lobby"
    MAIL_ROOM = "Mail Room"
    JANITORS_CLOSET = "Janitor’s Closet"
    POOL_AREA = "Pool Area"
    INDOOR_POOL = "Indoor Pool"
    OUTDOOR_POOL = "Outdoor Pool"
    HOT_TUB_SPA_AREA = "Hot Tub / Spa Area"
    SHED = "Shed"
    LANAI = "Lanai"
    OPEN_PORCH = "Open Porch"
    ENCLOSED_PORCH = "Enclosed Porch"
    ATTIC = "Attic"
    ENCLOSED_CABANA = "Enclosed Cabana"
    ATTACHED_CARPORT = "Attached Carport"
    DETACHED_CARPORT = "Detached Carport"
    DETACHED_UTILITY_CLOSET = "Detached Utility Closet"
    JACUZZI = "Jacuzzi"
    COURTYARD = "Courtyard"
    OPEN_COURTYARD = "Open Courtyard"
    SCREEN_PORCH_1_STORY = "Screen Porch (1-Story)"
    SCREEN_ENCLOSURE_2_STORY = "Screen Enclosure (2-Story)"
    SCREEN_ENCLOSURE_3_STORY = "Screen Enclosure (3-Story)"
    SCREEN_ENCLOSURE_CUSTOM = "Screen Enclosure (Custom)"
    LOWER_GARAGE = "Lower Garage"
    LOWER_SCREENED_PORCH = "Lower Screened Porch"
    STOOP = "Stoop"
    FIRST_FLOOR = "First Floor"
    SECOND_FLOOR = "Second Floor"
    THIRD_FLOOR = "Third Floor"
    FOURTH_FLOOR = "Fourth Floor"
    FLOOR = "Floor"
    BASEMENT = "Basement"
    SUB_BASEMENT = "Sub-Basement"
    LIVING_AREA = "Living Area"


class LotType(StrEnum):
    LESS_THAN_OR_EQUAL_TO_ONE_QUARTER_ACRE = "LessThanOrEqualToOneQuarterAcre"
    GREATER_THAN_ONE_QUARTER_ACRE = "GreaterThanOneQuarterAcre"
    PAVED_ROADWAY = "PavedRoadway"


class FencingType(StrEnum):
    WOOD = "Wood"
    VINYL = "Vinyl"
    ALUMINUM = "Aluminum"
    WROUGHT_IRON = "WroughtIron"
    BAMBOO = "Bamboo"
    COMPOSITE = "Composite"
    PRIVACY = "Privacy"
    PICKET = "Picket"
    SPLIT_RAIL = "SplitRail"
    STOCKADE = "Stockade"
    BOARD = "Board"
    CHAIN_LINK = "ChainLink"
    METAL = "Metal"
    STONE = "Stone"


class DrivewayMaterial(StrEnum):
    CONCRETE = "Concrete"
    ASPHALT = "Asphalt"
    PAVERS = "Pavers"
    GRAVEL = "Gravel"


class DeedType(StrEnum):
    WARRANTY_DEED = "Warranty Deed"
    SPECIAL_WARRANTY_DEED = "Special Warranty Deed"
    QUITCLAIM_DEED = "Quitclaim Deed"
    GRANT_DEED = "Grant Deed"
    BARGAIN_AND_SALE_DEED = "Bargain and Sale Deed"
    LADY_BIRD_DEED = "Lady Bird Deed"
    TRANSFER_ON_DEATH_DEED = "Transfer on Death Deed"
    SHERIFFS_DEED = "Sheriff's Deed"
    TAX_DEED = "Tax Deed"
    TRUSTEES_DEED = "Trustee's Deed"
    PERSONAL_REPRESENTATIVE_DEED = "Personal Representative Deed"
    CORRECTION_DEED = "Correction Deed"
    DEED_IN_LIEU_OF_FORECLOSURE = "Deed in Lieu of Foreclosure"
    LIFE_ESTATE_DEED = "Life Estate Deed"
    JOINT_TENANCY_DEED = "Joint Tenancy Deed"
    TENANCY_IN_COMMON_DEED = "Tenancy in Common Deed"
    COMMUNITY_PROPERTY_DEED = "Community Property Deed"
    GIFT_DEED = "Gift Deed"
    INTERSPOUSAL_TRANSFER_DEED = "Interspousal Transfer Deed"
    WILD_DEED = "Wild Deed"
    SPECIAL_MASTERS_DEED = "Special Master’s Deed"
    COURT_ORDER_DEED = "Court Order Deed"
    CONTRACT_FOR_DEED = "Contract for Deed"
    QUIET_TITLE_DEED = "Quiet Title Deed"
    ADMINISTRATORS_DEED = "Administrator's Deed"
    GUARDIANS_DEED = "Guardian's Deed"
    RECEIVERS_DEED = "Receiver's Deed"
    RIGHT_OF_WAY_DEED = "Right of Way Deed"
    VACATION_OF_PLAT_DEED = "Vacation of Plat Deed"
    ASSIGNMENT_OF_CONTRACT = "Assignment of Contract"
    RELEASE_OF_CONTRACT = "Release of Contract"
    MISCELLANEOUS = "Miscellaneous"


class FileDocumentType(StrEnum):
    CONVEYANCE_DEED_QUIT_CLAIM_DEED = "ConveyanceDeedQuitClaimDeed"
    CONVEYANCE_DEED_BARGAIN_AND_SALE_DEED = "ConveyanceDeedBargainAndSaleDeed"
    CONVEYANCE_DEED_WARRANTY_DEED = "ConveyanceDeedWarrantyDeed"
    CONVEYANCE_DEED = "ConveyanceDeed"
    TITLE = "Title"
    PROPERTY_IMAGE = "PropertyImage"


class FileFormat(StrEnum):
    PDF = "pdf"
    JPEG = "jpeg"
    PNG = "png"
    TXT = "txt"


class PersonNamePrefix(StrEnum):
    MR = "Mr."
    MRS = "Mrs."
    MS = "Ms."
    MISS = "Miss"
    MX = "Mx."
    DR = "Dr."
    PROF = "Prof."
    REV = "Rev."
    FR = "Fr."
    SR = "Sr."
    BR = "Br."
    CAPT = "Capt."
    COL = "Col."
    MAJ = "Maj."
    LT = "Lt."
    SGT = "Sgt."
    HON = "Hon."
    JUDGE = "Judge"
    RABBI = "Rabbi"
    IMAM = "Imam"
    SHEIKH = "Sheikh"
    SIR = "Sir"
    DAME = "Dame"


class PersonNameSuffix(StrEnum):
    JR = "Jr."
    SR = "Sr."
    II = "II"
    III = "III"
    IV = "IV"
    PHD = "PhD"
    MD = "MD"
    ESQ = "Esq."
    JD = "JD"
    LLM = "LLM"
    MBA = "MBA"
    RN = "RN"
    DDS = "DDS"
    DVM = "DVM"
    CFA = "CFA"
    CPA = "CPA"
    PE = "PE"
    PMP = "PMP"
    EMERITUS = "Emeritus"
    RET = "Ret."


ALL_VOCABULARIES: List[Type[StrEnum]] = [
    PropertyType,
    PropertyUsageType,
    OwnershipEstateType,
    StructureForm,
    BuildStatus,
    NumberOfUnitsType,
    ExteriorWallMaterial,
    ExteriorWallAccentMaterial,
    PrimaryFramingMaterial,
    RoofCoveringMaterial,
    RoofMaterialType,
    RoofDesignType,
    FlooringMaterial,
    InteriorWallSurfaceMaterial,
    FoundationType,
    AttachmentType,
    CoolingSystemType,
    HeatingSystemType,
    HeatingFuelType,
    SewerType,
    WaterSourceType,
    SpaceType,
    LotType,
    FencingType,
    DrivewayMaterial,
    DeedType,
    FileDocumentType,
    FileFormat,
    PersonNamePrefix,
    PersonNameSuffix,
]
