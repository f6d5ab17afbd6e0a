"""Florida Department of Revenue land-use codes (00-99).

Rows are (code, labels, (property_type, property_usage_type,
ownership_estate_type, structure_form, build_status)). Labels are the
spellings county appraiser pages actually print, including the
"NNNNN-Label" five-digit form some counties use.
"""

from __future__ import annotations

from ..lexicon import ClassificationMapping, Lexicon


_B = "Building"
_L = "LandParcel"
_U = "Unit"
_FS = "FeeSimple"
_IMP = "Improved"
_VAC = "VacantLand"

DOR_USE_CODES = [
    ("00", ["00 Vacant Residential", "Vacant Residential", "00000-Vacant Residential"],
     (_L, "Residential", _FS, None, _VAC)),
    ("01", ["01 Single Family", "Single Family", "00100-Single Family", "Single Family Residence"],
     (_B, "Residential", _FS, "SingleFamilyDetached", _IMP)),
    ("02", ["02 Mobile Homes", "Mobile Homes", "00200-Mobile Home", "Mobile Home"],
     ("ManufacturedHome", "Residential", _FS, "MobileHome", _IMP)),
    ("03", ["03 Multi-Family -10 units or more", "Multi-Family -10 units or more",
            "00300-Multifamily", "Multi Family More Than 10 Units"],
     (_B, "Residential", _FS, "MultiFamilyMoreThan10", _IMP)),
    ("04", ["04 Condominium", "Condominium", "00400-Condominium"],
     (_U, "Residential", "Condominium", "ApartmentUnit", _IMP)),
    ("05", ["05 Cooperatives", "Cooperatives", "Cooperative"],
     (_U, "Residential", "Cooperative", "ApartmentUnit", _IMP)),
    ("06", ["06 Retirement Homes not eligible for exemption",
            "Retirement Homes not eligible for exemption", "Retirement Homes"],
     (_B, "Retirement", _FS, "MultiFamily5Plus", _IMP)),
    ("07", ["07 Miscellaneous Residential", "Miscellaneous Residential", "Villa Homes"],
     (_B, "Residential", _FS, "MultiFamily5Plus", _IMP)),
    ("08", ["08 Multi-Family -fewer than 10 units", "Multi-Family fewer than 10 units",
            "Multi-Family <10 Units"],
     (_B, "Residential", _FS, "MultiFamilyLessThan10", _IMP)),
    ("09", ["09 Residential Common Elements/Areas", "Residential Common Elements",
            "Residential Common Areas"],
     (_L, "ResidentialCommonElementsAreas", "Condominium", None, _IMP)),
    ("10", ["10 Vacant Commercial", "Vacant Commercial"],
     (_L, "Commercial", _FS, None, _VAC)),
    ("11", ["11 Retail Stores, One Story", "Retail Stores One Story", "Retail Store"],
     (_B, "RetailStore", _FS, None, _IMP)),
    ("12", ["12 Stores, Office, SFR -mixed use", "Stores Office SFR mixed use", "Mixed Use"],
     (_B, "RetailStore", _FS, None, _IMP)),
    ("13", ["13 Department Stores", "Department Stores"],
     (_B, "DepartmentStore", _FS, None, _IMP)),
    ("14", ["14 Supermarkets", "Supermarkets"],
     (_B, "Supermarket", _FS, None, _IMP)),
    ("15", ["15 Shopping Centers Regional", "Shopping Centers Regional",
            "Regional Shopping Center"],
     (_B, "ShoppingCenterRegional", _FS, None, _IMP)),
    ("16", ["16 Shopping Centers Community", "Shopping Centers Community",
            "Community Shopping Center"],
     (_B, "ShoppingCenterCommunity", _FS, None, _IMP)),
    ("17", ["17 1 Story Office", "1 Story Office"],
     (_B, "OfficeBuilding", _FS, None, _IMP)),
    ("18", ["18 Multi-Story Office", "Multi-Story Office"],
     (_B, "OfficeBuilding", _FS, None, _IMP)),
    ("19", ["19 Professional Service Buildings", "Professional Service Buildings"],
     (_B, "OfficeBuilding", _FS, None, _IMP)),
    ("20", ["20 Airports, bus terminals, piers marinas", "Airports bus terminals piers marinas"],
     (_B, "TransportationTerminal", _FS, None, _IMP)),
    ("21", ["21 Restaurants, cafeterias", "Restaurants cafeterias", "Restaurant"],
     (_B, "Restaurant", _FS, None, _IMP)),
    ("22", ["22 Drive-In Restaurants", "Drive-In Restaurants"],
     (_B, "Restaurant", _FS, None, _IMP)),
    ("23", ["23 Financial Institutions (banks,saving & loan,mortgage,credit co)",
            "Financial Institutions", "Banks Savings Loan Mortgage Credit"],
     (_B, "FinancialInstitution", _FS, None, _IMP)),
    ("24", ["24 Insurance Company Offices", "Insurance Company Offices"],
     (_B, "OfficeBuilding", _FS, None, _IMP)),
    ("25", ["25 Service Shops Non-Automotive", "Service Shops Non-Automotive"],
     (_B, "RetailStore", _FS, None, _IMP)),
    ("26", ["26 Service Stations", "Service Stations"],
     (_B, "ServiceStation", _FS, None, _IMP)),
    ("27", ["27 Auto Sales, Service, etc.", "Auto Sales Service"],
     (_B, "AutoSalesRepair", _FS, None, _IMP)),
    ("28", ["28 Rental MH/RV Parks, parking lots (commercial or patron)",
            "Rental MH RV Parks", "Mobile Home Parks"],
     (_B, "MobileHomePark", _FS, None, _IMP)),
    ("29", ["29 Wholesale manufacturing outlets, produce houses",
            "Wholesale manufacturing outlets", "Produce Houses"],
     (_B, "WholesaleOutlet", _FS, None, _IMP)),
    ("30", ["30 Florist, Greenhouses", "Florist Greenhouses", "Florist and Greenhouses"],
     (_B, "NurseryGreenhouse", _FS, None, _IMP)),
    ("31", ["31 Theaters Drive-In, open stadiums", "Theaters Drive-In", "Open Stadiums"],
     (_B, "Theater", _FS, None, _IMP)),
    ("32", ["32 Theaters auditoriums enclosed", "Theaters auditoriums enclosed",
            "Enclosed Theaters"],
     (_B, "Theater", _FS, None, _IMP)),
    ("33", ["33 Night Clubs, Bars, lounges", "Night Clubs Bars Lounges"],
     (_B, "Entertainment", _FS, None, _IMP)),
    ("34", ["34 Bowling Alleys, skating rinks, pool halls, enclosed arenas",
            "Bowling Alleys", "Skating Rinks", "Enclosed Arenas"],
     (_B, "Entertainment", _FS, None, _IMP)),
    ("35", ["35 Tourist Attractions, fairgrounds (privately owned)",
            "Tourist Attractions", "Fairgrounds"],
     (_B, "Entertainment", _FS, None, _IMP)),
    ("36", ["36 Camps", "Camps"],
     (_L, "Recreational", _FS, None, _IMP)),
    ("37", ["37 Race Tracks", "Race Tracks"],
     (_B, "RaceTrack", _FS, None, _IMP)),
    ("38", ["38 Golf Courses, driving ranges", "Golf Courses", "Driving Ranges"],
     (_L, "GolfCourse", _FS, None, _IMP)),
    ("39", ["39 Hotels, Motels", "Hotels", "Motels"],
     (_B, "Hotel", _FS, None, _IMP)),
    ("40", ["40 Vacant Industrial", "Vacant Industrial"],
     (_L, "Industrial", _FS, None, _VAC)),
    ("41", ["41 Light Manufacturing", "Light Manufacturing"],
     (_B, "LightManufacturing", _FS, None, _IMP)),
    ("42", ["42 Heavy Industrial", "Heavy Industrial"],
     (_B, "HeavyManufacturing", _FS, None, _IMP)),
    ("43", ["43 Lumber Yards, sawmills", "Lumber Yards", "Sawmills"],
     (_B, "LumberYard", _FS, None, _IMP)),
    ("44", ["44 Packing Plants", "Packing Plants"],
     (_B, "PackingPlant", _FS, None, _IMP)),
    ("45", ["45 Breweries, Wineries, distilleries, canneries", "Breweries", "Wineries",
            "Distilleries", "Canneries"],
     (_B, "VineyardWinery", _FS, None, _IMP)),
    ("46", ["46 Food Processing", "Food Processing"],
     (_B, "Cannery", _FS, None, _IMP)),
    ("47", ["47 Mineral Processing", "Mineral Processing"],
     (_B, "MineralProcessing", _FS, None, _IMP)),
    ("48", ["48 Warehousing (Block or Metal)", "Warehousing", "Warehouse"],
     (_B, "Warehouse", _FS, None, _IMP)),
    ("49", ["49 Open Storage, junk yards, fuel storage", "Open Storage", "Junk Yards",
            "Fuel Storage"],
     (_L, "OpenStorage", _FS, None, _IMP)),
    ("50", ["50 Improved agricultural rural homesite", "Improved agricultural rural homesite"],
     (_B, "Agricultural", _FS, "SingleFamilyDetached", _IMP)),
    ("51", ["51 Cropland Class I", "Cropland Class I"],
     (_L, "DrylandCropland", _FS, None, _IMP)),
    ("52", ["52 Cropland Class II", "Cropland Class II"],
     (_L, "CroplandClass2", _FS, None, _IMP)),
    ("53", ["53 Cropland Class III", "Cropland Class III"],
     (_L, "CroplandClass3", _FS, None, _IMP)),
    ("54", ["54 Timber - Site Index I", "Timber Site Index I"],
     (_L, "TimberLand", _FS, None, _IMP)),
    ("55", ["55 Timber - Site Index II", "Timber Site Index II"],
     (_L, "TimberLand", _FS, None, _IMP)),
    ("56", ["56 Timber - Site Index III", "Timber Site Index III"],
     (_L, "TimberLand", _FS, None, _IMP)),
    ("57", ["57 Timber - Site Index IV", "Timber Site Index IV"],
     (_L, "TimberLand", _FS, None, _IMP)),
    ("58", ["58 Timber - Site Index V", "Timber Site Index V"],
     (_L, "TimberLand", _FS, None, _IMP)),
    ("59", ["59 Timber - Not Classified by site index to Pines", "Timber Not Classified",
            "Timberland"],
     (_L, "TimberLand", _FS, None, _IMP)),
    ("60", ["60 Grazing Land Class I", "Grazing Land Class I"],
     (_L, "ImprovedPasture", _FS, None, _IMP)),
    ("61", ["61 Grazing Land Class II", "Grazing Land Class II"],
     (_L, "ImprovedPasture", _FS, None, _IMP)),
    ("62", ["62 Grazing Land Class III", "Grazing Land Class III"],
     (_L, "NativePasture", _FS, None, _IMP)),
    ("63", ["63 Grazing Land Class IV", "Grazing Land Class IV"],
     (_L, "NativePasture", _FS, None, _IMP)),
    ("64", ["64 Grazing Land Class V", "Grazing Land Class V"],
     (_L, "Rangeland", _FS, None, _IMP)),
    ("65", ["65 Grazing Land Class VI", "Grazing Land Class VI"],
     (_L, "Rangeland", _FS, None, _IMP)),
    ("66", ["66 Orchard Groves", "Orchard Groves"],
     (_L, "OrchardGroves", _FS, None, _IMP)),
    ("67", ["67 Poultry, Bees, etc.", "Poultry Bees"],
     (_L, "Poultry", _FS, None, _IMP)),
    ("68", ["68 Dairies, Feed Lots", "Dairies Feed Lots"],
     (_L, "LivestockFacility", _FS, None, _IMP)),
    ("69", ["69 Ornamentals", "Ornamentals"],
     (_L, "Ornamentals", _FS, None, _IMP)),
    ("70", ["70 Vacant Institutional", "Vacant Institutional"],
     (_L, "GovernmentProperty", _FS, None, _VAC)),
    ("71", ["71 Churches", "Churches"],
     (_B, "Church", _FS, None, _IMP)),
    ("72", ["72 Schools, Colleges, Private", "Private Schools Colleges"],
     (_B, "PrivateSchool", _FS, None, _IMP)),
    ("73", ["73 Hospitals, Private", "Private Hospitals"],
     (_B, "PrivateHospital", _FS, None, _IMP)),
    ("74", ["74 Homes for the Aged", "Homes for the Aged"],
     (_B, "HomesForAged", _FS, None, _IMP)),
    ("75", ["75 Orphanages, other non-profit or charitable services", "Orphanages",
            "Non Profit Charitable Services"],
     (_B, "NonProfitCharity", _FS, None, _IMP)),
    ("76", ["76 Mortuaries, Cemeteries, crematoriums", "Mortuaries", "Cemeteries",
            "Crematoriums"],
     (_L, "MortuaryCemetery", _FS, None, _IMP)),
    ("77", ["77 Clubs, Lodges, Union Halls", "Clubs", "Lodges", "Union Halls"],
     (_B, "ClubsLodges", _FS, None, _IMP)),
    ("78", ["78 Out Patient Clinics, Sanitariums, convalescent, rest homes",
            "Out Patient Clinics", "Sanitariums", "Convalescent Homes"],
     (_B, "SanitariumConvalescentHome", _FS, None, _IMP)),
    ("79", ["79 Cultural organizations, facilities", "Cultural organizations",
            "Cultural facilities"],
     (_B, "CulturalOrganization", _FS, None, _IMP)),
    ("80", ["80 Vacant Governmental (municipal,counties,state,federal,dot,swfwmd)",
            "Vacant Governmental"],
     (_L, "GovernmentProperty", _FS, None, _VAC)),
    ("81", ["81 Military", "Military"],
     (_B, "Military", _FS, None, _IMP)),
    ("82", ["82 Forests, Parks, recreational areas", "Forests Parks recreational areas"],
     (_L, "ForestParkRecreation", _FS, None, _IMP)),
    ("83", ["83 Schools, Public", "Public Schools"],
     (_B, "PublicSchool", _FS, None, _IMP)),
    ("84", ["84 Colleges Public", "Public Colleges"],
     (_B, "PublicSchool", _FS, None, _IMP)),
    ("85", ["85 Hospitals Public", "Public Hospitals"],
     (_B, "PublicHospital", _FS, None, _IMP)),
    ("86", ["86 Other County", "Other County"],
     (_L, "GovernmentProperty", _FS, None, _IMP)),
    ("87", ["87 Other State", "Other State"],
     (_L, "GovernmentProperty", _FS, None, _IMP)),
    ("88", ["88 Other Federal", "Other Federal"],
     (_L, "GovernmentProperty", _FS, None, _IMP)),
    ("89", ["89 Other Municipal", "Other Municipal"],
     (_L, "GovernmentProperty", _FS, None, _IMP)),
    ("90", ["90 Leasehold Interests (government owned non government lessee)",
            "Leasehold Interests"],
     (_L, "GovernmentProperty", "Leasehold", None, _IMP)),
    ("91", ["91 Utilities", "Utilities"],
     (_B, "Utility", _FS, None, _IMP)),
    ("92", ["92 Mining lands, petroleum or gas lands", "Mining lands",
            "Petroleum or gas lands"],
     (_L, "MineralProcessing", _FS, None, _IMP)),
    ("93", ["93 Subsurface rights", "Subsurface rights"],
     (_L, "Unknown", "SubsurfaceRights", None, _VAC)),
    ("94", ["94 Right-of-Way, Streets, Ditch", "Right-of-Way", "Streets", "Ditch"],
     (_L, "GovernmentProperty", "RightOfWay", None, _VAC)),
    ("95", ["95 Rivers and Lakes, Submerged Lands", "Rivers and Lakes", "Submerged Lands"],
     (_L, "RiversLakes", _FS, None, _VAC)),
    ("96", ["96 Sewage Disposal, Waste Lands, Swamp", "Sewage Disposal", "Waste Lands",
            "Swamp"],
     (_L, "SewageDisposal", _FS, None, _VAC)),
    ("97", ["97 Outdoor Rec./Parkland, High-Water Recharge", "Outdoor Recreation Parkland",
            "High-Water Recharge"],
     (_L, "Recreational", _FS, None, _VAC)),
    ("98", ["98 Centrally Assessed Railroad", "Centrally Assessed Railroad"],
     (_L, "Railroad", _FS, None, _IMP)),
    ("99", ["99 Non-AG (Over 20 Acres)", "Non-AG Over 20 Acres"],
     (_L, "TransitionalProperty", _FS, None, _VAC)),
]


def build_lexicon(name: str = "florida_dor") -> Lexicon:
    lexicon = Lexicon(name)
    for code, labels, attrs in DOR_USE_CODES:
        lexicon.register(code, labels, ClassificationMapping(*attrs))
    return lexicon
