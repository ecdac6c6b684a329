"""Headcount out-of-model dataset.

Source: Physical Schools HC - YE'25, Schools Data Sheet, Staff Interim
Assignments, Comp Benchmarks by Pricing Model.

Driver categories:
1. Training Hub: Austin campuses intentionally overstaffed for guide training
2. Non-Standard Ratio: schools running a different student:guide ratio than model
3. Pre-Launch: guides hired ahead of school opening
4. Temporary: health leave, maternity coverage, pipeline-based hires
5. Timing: guides hired proactively as enrollment approaches triggers
6. Underhiring: schools operating below model (offset)
7. At Model: staffed per model
8. Staffing Gap: fewer guides than expected

Edit by hand. ``variance`` and ``status`` are derived, never entered.
"""

from __future__ import annotations

from typing import Dict, Tuple

from headcount.models import InterimAssignment, SalaryFlag, School

DATA_UPDATED = "February 2026"
DATA_SOURCES = (
    "Physical Schools HC - YE'25",
    "Schools Data Sheet",
    "Staff Interim Assignments",
    "Comp Benchmarks by Pricing Model",
)

PRICING_40K = "Alpha $40K"
PRICING_50K = "Alpha $50K+"
PRICING_LOW_COST = "Low-Cost (Sub-$40K)"


# ---------------- Schools ----------------
SCHOOLS: Tuple[School, ...] = (
    School(
        name="Alpha School: Austin Spyglass",
        enrolled=161, confirmed_enrollments=158, capacity=212, guides_actual=32, guides_model=15,
        annual_cost=2858000, avg_guide_salary=168117, total_guide_cost=5379744,
        student_guide_ratio="5:1", model_ratio="11:1",
        school_type="Alpha", tuition_tier="$40K", driver="Training Hub",
        notes="Always overstaffed; training grounds for guides deployed network-wide",
        state="TX", city="Austin", grades="K-8", opened="2014-08", location_type="Campus",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha School: Miami",
        enrolled=67, confirmed_enrollments=71, capacity=184, guides_actual=10, guides_model=6,
        annual_cost=939000, avg_guide_salary=234738, total_guide_cost=2347380,
        student_guide_ratio="7:1", model_ratio="11:1",
        school_type="Alpha", tuition_tier="$40K", driver="Timing",
        notes="Hired proactively as enrollment approached trigger thresholds across 5 levels",
        state="FL", city="Miami", grades="K-8", opened="2022-08", location_type="Campus",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha High School: Austin",
        enrolled=50, confirmed_enrollments=50, capacity=206, guides_actual=8, guides_model=4,
        annual_cost=678000, avg_guide_salary=169425, total_guide_cost=1355400,
        student_guide_ratio="6:1", model_ratio="11:1",
        school_type="Alpha", tuition_tier="$40K", driver="Training Hub",
        notes="Austin training hub; guides trained here before deployment",
        state="TX", city="Austin", grades="9-12", opened="2022-08", location_type="Campus",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha School: Brownsville",
        enrolled=40, confirmed_enrollments=42, capacity=55, guides_actual=9, guides_model=4,
        annual_cost=897000, avg_guide_salary=179358, total_guide_cost=1614222,
        student_guide_ratio="4:1", model_ratio="25:1",
        school_type="Alpha", tuition_tier="Sub-$40K", driver="Non-Standard Ratio",
        notes="Priced at $15K tuition (SpaceX collaboration) but staffed as Alpha with 1 guide per level",
        state="TX", city="Brownsville", grades="K-8", opened="2022-08", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=15000,
    ),
    School(
        name="Texas Sports Academy",
        enrolled=35, confirmed_enrollments=33, capacity=1000, guides_actual=8, guides_model=4,
        annual_cost=566000, avg_guide_salary=141413, total_guide_cost=1131304,
        student_guide_ratio="4:1", model_ratio="25:1",
        school_type="Non-Alpha", tuition_tier="Sub-$40K", driver="Non-Standard Ratio",
        notes="One guide per level after prior-year performance failure; flagship recovery investment",
        state="TX", city="Lakeway", grades="3-12", opened="2023-08", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=25000,
    ),
    School(
        name="Alpha Scottsdale",
        enrolled=32, confirmed_enrollments=32, capacity=38, guides_actual=8, guides_model=4,
        annual_cost=533000, avg_guide_salary=133312, total_guide_cost=1066496,
        student_guide_ratio="4:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Temporary",
        notes="Health leave coverage + temporary guide from Tampa + pipeline-based hiring",
        state="AZ", city="Scottsdale", grades="K-8", opened="2024-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Anywhere Center",
        enrolled=27, confirmed_enrollments=25, capacity=123, guides_actual=7, guides_model=4,
        annual_cost=450000, avg_guide_salary=150042, total_guide_cost=1050294,
        student_guide_ratio="4:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$50K+", driver="Non-Standard Ratio",
        notes="Operating to 6:1 ratio; commitment made to New York families",
        state="NY", city="New York", grades="K-8", opened="2024-09", location_type="Learning Center",
        pricing_model=PRICING_50K, tuition=65000,
    ),
    School(
        name="Nova Austin",
        enrolled=47, confirmed_enrollments=52, capacity=252, guides_actual=6, guides_model=4,
        annual_cost=297000, avg_guide_salary=148500, total_guide_cost=891000,
        student_guide_ratio="8:1", model_ratio="25:1",
        school_type="Non-Alpha", tuition_tier="Sub-$40K", driver="Temporary",
        notes="Staffed for 70+ inherited students; one guide moved to Bastrop, one coaching out",
        state="TX", city="Austin", grades="K-8", opened="2023-08", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=15000,
    ),
    School(
        name="Alpha Plano",
        enrolled=7, confirmed_enrollments=7, capacity=25, guides_actual=4, guides_model=3,
        annual_cost=192000, avg_guide_salary=192375, total_guide_cost=769500,
        student_guide_ratio="2:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Temporary",
        notes="Temp Lead Guide covering maternity leave through February",
        state="TX", city="Plano", grades="K-8", opened="2025-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Charlotte",
        enrolled=0, confirmed_enrollments=0, capacity=40, guides_actual=4, guides_model=3,
        annual_cost=143000, avg_guide_salary=143100, total_guide_cost=572400,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Pre-Launch",
        notes="Pre-launch; 3 guides deployed to Austin, Scottsdale, NY, Miami, Dorado",
        state="NC", city="Charlotte", grades="K-8", opened="2026-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Houston",
        enrolled=0, confirmed_enrollments=0, capacity=25, guides_actual=4, guides_model=0,
        annual_cost=770000, avg_guide_salary=192375, total_guide_cost=769500,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Pre-Launch",
        notes="Pre-launch; guides deployed to Austin, Santa Barbara, NY, One Hope, Dorado",
        state="TX", city="Houston", grades="K-8", opened="2026-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Waypoint Academy",
        enrolled=0, confirmed_enrollments=1, capacity=25, guides_actual=2, guides_model=0,
        annual_cost=263000, avg_guide_salary=131626, total_guide_cost=263252,
        student_guide_ratio="0:1", model_ratio="25:1",
        school_type="Non-Alpha", tuition_tier="Sub-$40K", driver="Pre-Launch",
        notes="Pre-launch; guides 100% deployed to Austin L2 + MS workshops; 1 student enrolled Jan",
        state="TX", city="Austin", grades="K-8", opened="2026-08", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=20000,
    ),
    School(
        name="Alpha Orlando",
        enrolled=0, confirmed_enrollments=0, capacity=25, guides_actual=1, guides_model=0,
        annual_cost=162000, avg_guide_salary=162001, total_guide_cost=162001,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Pre-Launch",
        notes="Pre-launch; guide deployed to Spotswood NJ, NY, Dorado",
        state="FL", city="Orlando", grades="K-8", opened="2026-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    # --- at model ---
    School(
        name="GT School: Georgetown",
        enrolled=21, confirmed_enrollments=21, capacity=180, guides_actual=4, guides_model=4,
        annual_cost=0, avg_guide_salary=141413, total_guide_cost=565652,
        student_guide_ratio="5:1", model_ratio="25:1",
        school_type="Non-Alpha", tuition_tier="Sub-$40K", driver="At Model",
        notes="At model; one guide per level",
        state="TX", city="Georgetown", grades="K-8", opened="2023-08", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=25000,
    ),
    School(
        name="Alpha Fort Worth",
        enrolled=11, confirmed_enrollments=11, capacity=18, guides_actual=4, guides_model=4,
        annual_cost=0, avg_guide_salary=138375, total_guide_cost=553500,
        student_guide_ratio="3:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="At Model",
        notes="Now at model (was +1); enrollment grew 9 to 11",
        state="TX", city="Fort Worth", grades="K-8", opened="2024-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="NextGen",
        enrolled=10, confirmed_enrollments=9, capacity=80, guides_actual=3, guides_model=3,
        annual_cost=0, avg_guide_salary=148500, total_guide_cost=445500,
        student_guide_ratio="3:1", model_ratio="25:1",
        school_type="Non-Alpha", tuition_tier="Sub-$40K", driver="At Model",
        notes="At model",
        state="TX", city="Austin", grades="6-12", opened="2024-08", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=15000,
    ),
    School(
        name="Alpha San Francisco",
        enrolled=19, confirmed_enrollments=19, capacity=68, guides_actual=3, guides_model=3,
        annual_cost=0, avg_guide_salary=150000, total_guide_cost=450000,
        student_guide_ratio="6:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$50K+", driver="At Model",
        notes="At model",
        state="CA", city="San Francisco", grades="K-8", opened="2024-08", location_type="Microschool",
        pricing_model=PRICING_50K, tuition=60000,
    ),
    School(
        name="Alpha Bushy Creek",
        enrolled=16, confirmed_enrollments=16, capacity=25, guides_actual=2, guides_model=2,
        annual_cost=0, avg_guide_salary=150000, total_guide_cost=300000,
        student_guide_ratio="8:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="At Model",
        notes="New school; appears to be rebrand of Montessorium Brushy Creek",
        state="TX", city="Cedar Park", grades="PK-2", opened="2025-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Lake Forest",
        enrolled=12, confirmed_enrollments=12, capacity=25, guides_actual=3, guides_model=3,
        annual_cost=0, avg_guide_salary=150000, total_guide_cost=450000,
        student_guide_ratio="4:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$50K+", driver="At Model",
        notes="At model; enrollment grew 5 to 12",
        state="IL", city="Lake Forest", grades="K-8", opened="2025-08", location_type="Microschool",
        pricing_model=PRICING_50K, tuition=50000,
    ),
    School(
        name="Alpha Palm Beach",
        enrolled=7, confirmed_enrollments=8, capacity=25, guides_actual=3, guides_model=3,
        annual_cost=0, avg_guide_salary=150000, total_guide_cost=450000,
        student_guide_ratio="2:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$50K+", driver="At Model",
        notes="At model",
        state="FL", city="Palm Beach", grades="K-8", opened="2025-08", location_type="Microschool",
        pricing_model=PRICING_50K, tuition=50000,
    ),
    School(
        name="Alpha Chantilly",
        enrolled=4, confirmed_enrollments=4, capacity=25, guides_actual=3, guides_model=3,
        annual_cost=0, avg_guide_salary=150000, total_guide_cost=450000,
        student_guide_ratio="1:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="At Model",
        notes="At model",
        state="VA", city="Chantilly", grades="K-8", opened="2025-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Raleigh",
        enrolled=0, confirmed_enrollments=0, capacity=25, guides_actual=3, guides_model=3,
        annual_cost=0, avg_guide_salary=150000, total_guide_cost=450000,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="At Model",
        notes="At model; 2 guides deployed to Miami through end of school year",
        state="NC", city="Raleigh", grades="K-8", opened="2026-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Santa Barbara",
        enrolled=12, confirmed_enrollments=13, capacity=78, guides_actual=3, guides_model=3,
        annual_cost=0, avg_guide_salary=150000, total_guide_cost=450000,
        student_guide_ratio="4:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$50K+", driver="At Model",
        notes="At model; ramping up",
        state="CA", city="Santa Barbara", grades="K-8", opened="2025-08", location_type="Microschool",
        pricing_model=PRICING_50K, tuition=50000,
    ),
    # --- under model ---
    School(
        name="Nova Bastrop",
        enrolled=15, confirmed_enrollments=15, capacity=18, guides_actual=3, guides_model=4,
        annual_cost=-162000, avg_guide_salary=162009, total_guide_cost=486027,
        student_guide_ratio="5:1", model_ratio="25:1",
        school_type="Non-Alpha", tuition_tier="Sub-$40K", driver="Underhiring",
        notes="One position unfilled; quality risk if enrollment grows",
        state="TX", city="Bastrop", grades="K-5", opened="2024-08", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=15000,
    ),
    School(
        name="Alpha Tampa",
        enrolled=0, confirmed_enrollments=0, capacity=25, guides_actual=1, guides_model=3,
        annual_cost=-270000, avg_guide_salary=135000, total_guide_cost=135000,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Pre-Launch",
        notes="Pre-launch; both guides deployed to Miami, Scottsdale, Palm Beach, SF, BTX",
        state="FL", city="Tampa", grades="K-8", opened="2026-08", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Montessorium Brushy Creek",
        enrolled=16, confirmed_enrollments=0, capacity=25, guides_actual=0, guides_model=2,
        annual_cost=0, avg_guide_salary=0, total_guide_cost=0,
        student_guide_ratio="0:1", model_ratio="13:1",
        school_type="Montessorium", tuition_tier="Sub-$40K", driver="Staffing Gap",
        notes="Guides appear to have moved to Alpha Bushy Creek",
        state="TX", city="Cedar Park", grades="PK-K", opened="2021-08", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=20000,
    ),
    # --- zero activity ---
    School(
        name="Alpha Denver",
        enrolled=0, capacity=25, guides_actual=0, guides_model=0,
        annual_cost=0, avg_guide_salary=0, total_guide_cost=0,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Pre-Launch",
        notes="Pre-launch; no staff assigned",
        state="CO", city="Denver", grades="K-8", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Maryland Bethesda",
        enrolled=0, capacity=25, guides_actual=0, guides_model=0,
        annual_cost=0, avg_guide_salary=0, total_guide_cost=0,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$50K+", driver="Pre-Launch",
        notes="Pre-launch; no staff assigned",
        state="MD", city="Bethesda", grades="K-8", location_type="Microschool",
        pricing_model=PRICING_50K, tuition=50000,
    ),
    School(
        name="Alpha Folsom",
        enrolled=0, capacity=25, guides_actual=0, guides_model=0,
        annual_cost=0, avg_guide_salary=0, total_guide_cost=0,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Pre-Launch",
        notes="Pre-launch; no staff assigned",
        state="CA", city="Folsom", grades="K-8", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Puerto Rico",
        enrolled=0, capacity=25, guides_actual=0, guides_model=0,
        annual_cost=0, avg_guide_salary=0, total_guide_cost=0,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$40K", driver="Pre-Launch",
        notes="Pre-launch; no staff assigned",
        state="PR", city="Dorado", grades="K-8", location_type="Microschool",
        pricing_model=PRICING_40K, tuition=40000,
    ),
    School(
        name="Alpha Piedmont",
        enrolled=0, capacity=25, guides_actual=0, guides_model=0,
        annual_cost=0, avg_guide_salary=0, total_guide_cost=0,
        student_guide_ratio="0:1", model_ratio="8:1",
        school_type="Alpha Microschool", tuition_tier="$50K+", driver="Pre-Launch",
        notes="Pre-launch; no staff assigned",
        state="CA", city="Piedmont", grades="K-8", location_type="Microschool",
        pricing_model=PRICING_50K, tuition=50000,
    ),
    School(
        name="Alpha Brownsville Preschool",
        enrolled=5, confirmed_enrollments=5, capacity=20, guides_actual=0, guides_model=0,
        annual_cost=0, avg_guide_salary=0, total_guide_cost=0,
        student_guide_ratio="0:1", model_ratio="25:1",
        school_type="Alpha", tuition_tier="Sub-$40K", driver="At Model",
        notes="New; split from Brownsville main; no dedicated staff",
        state="TX", city="Brownsville", grades="PK", opened="2025-08", location_type="Preschool",
        pricing_model=PRICING_LOW_COST, tuition=10000,
    ),
    School(
        name="Sports Academy: Carrollton",
        enrolled=0, capacity=0, guides_actual=0, guides_model=0,
        annual_cost=0, avg_guide_salary=0, total_guide_cost=0,
        student_guide_ratio="0:1", model_ratio="25:1",
        school_type="Non-Alpha", tuition_tier="Sub-$40K", driver="At Model",
        notes="No activity",
        state="TX", city="Carrollton", grades="3-12", location_type="Campus",
        pricing_model=PRICING_LOW_COST, tuition=25000,
    ),
)


# ---------------- Interim assignments ----------------
INTERIM_ASSIGNMENTS: Tuple[InterimAssignment, ...] = (
    InterimAssignment("Christina Romero", "Lead Guide", "Houston", ("Santa Barbara", "Austin L2", "Houston", "Dorado"), 60),
    InterimAssignment("Phoebe Weaver", "Reading Specialist", "Houston", ("One Hope", "NY", "Future 2 project"), 80),
    InterimAssignment("Milli Patel", "Guide", "Houston", ("Training",), 0),
    InterimAssignment("David Beaton", "Lead Guide", "Tampa", ("Miami (interim Lead)", "Palm Beach", "BTX", "Guide Training"), 90),
    InterimAssignment("Jackson Newton", "Guide", "Tampa", ("Scottsdale", "SF"), 85),
    InterimAssignment("Eric Salgado", "Lead Guide", "Orlando", ("Orlando", "Spotswood NJ", "Dorado"), 70),
    InterimAssignment("Samantha Gaboian", "Guide", "Orlando", ("NY", "Remote RS"), 90),
    InterimAssignment("Timothy Berry", "Lead Guide", "Charlotte", ("Austin", "Lake Forest", "Scottsdale", "CLT", "Dorado"), 75),
    InterimAssignment("Timothy Sheehy", "Guide", "Charlotte", ("Austin", "Scottsdale", "CLT/Chantilly", "NY", "Miami", "Dorado"), 90),
    InterimAssignment("Joanna Sanner", "Guide", "Charlotte", ("CLT", "ATX", "SF", "SB", "Dorado"), 70),
    InterimAssignment("Courtney Fenner", "Lead Guide", "Raleigh", ("Chantilly", "Miami", "Raleigh info sessions"), 55),
    InterimAssignment("Jennifer Greenham", "Guide", "Raleigh", ("In training", "Miami"), 50),
    InterimAssignment("Tamara Friend", "Guide", "Raleigh", ("In training", "Miami"), 50),
    InterimAssignment("Erica Kinney", "Reading Specialist", "Raleigh", ("Training",), 0),
    InterimAssignment("Bryan Gordon", "Lead Guide", "Waypoint Academy", ("Alpha Austin L2 + MS workshop",), 100),
    InterimAssignment("Patrick Kern", "Guide", "Waypoint Academy", ("Alpha Austin L2 + MS workshop",), 100),
    InterimAssignment("Christina Morris", "Guide", "Waypoint Academy", ("Training",), 0),
    InterimAssignment("Jennifer Walrod", "Lead Guide", "2HL", ("SF", "L3 camping"), 100),
    InterimAssignment("Katie Boye", "Lead Guide", "2HL", ("Living Water", "L2 snowboarding"), 100),
)


# ---------------- Salary flags ----------------
# Only overages are recorded.
SALARY_FLAGS: Tuple[SalaryFlag, ...] = (
    SalaryFlag("Alpha School: Brownsville", PRICING_LOW_COST, "M. Garza", "Lead Guide", 120000, 90000),
    SalaryFlag("Alpha School: Brownsville", PRICING_LOW_COST, "A. Treviño", "Guide", 100000, 75000),
    SalaryFlag("Alpha School: Brownsville", PRICING_LOW_COST, "L. Cantu", "Guide", 100000, 75000),
    SalaryFlag("Alpha School: Brownsville", PRICING_LOW_COST, "R. Salinas", "Guide", 100000, 75000),
    SalaryFlag("Nova Austin", PRICING_LOW_COST, "K. Howard", "Guide", 100000, 75000),
    SalaryFlag("Nova Austin", PRICING_LOW_COST, "S. Patel", "Guide", 100000, 75000),
    SalaryFlag("Alpha School: Miami", PRICING_40K, "J. Alvarez", "Lead Guide", 185000, 150000),
    SalaryFlag("Alpha School: Miami", PRICING_40K, "C. Ortiz", "Guide", 132000, 120000),
    SalaryFlag("Texas Sports Academy", PRICING_LOW_COST, "D. Reed", "Lead Guide", 115000, 90000),
    SalaryFlag("Texas Sports Academy", PRICING_LOW_COST, "B. Nguyen", "Guide", 95000, 75000),
    SalaryFlag("Nova Bastrop", PRICING_LOW_COST, "T. Morales", "Guide", 98000, 75000),
    SalaryFlag("Alpha School: Austin Spyglass", PRICING_40K, "E. Walsh", "Guide", 135000, 120000),
)


# ---------------- Narrative content ----------------
DECISIONS_OUTSTANDING: Tuple[Dict[str, str], ...] = (
    {"title": "Austin Training Hub", "cost": "$3.5M/yr", "question": "Formalize as central investment with a cap, or reduce?"},
    {"title": "Product Ratios (BTX, NYC, TSA)", "cost": "$1.9M/yr", "question": "Update models to match actual ratios, or revert to standard?"},
    {"title": "Pre-Launch Staffing Policy", "cost": "~$1.1M/yr", "question": "When do schools enroll students or release guides?"},
    {"title": "Temporary Variance", "cost": "~$1.0M/yr", "question": "Scottsdale, Plano, Nova Austin: have these self-resolved?"},
)

RECEIVING_SCHOOLS: Tuple[Dict[str, str], ...] = (
    {"school": "New York / Anywhere Center", "level": "High", "sources": "Charlotte, Houston, Orlando, Raleigh"},
    {"school": "Miami", "level": "High", "sources": "Tampa, Raleigh (Greenham, Friend since S3)"},
    {"school": "Austin", "level": "Medium", "sources": "Houston, Charlotte, Waypoint"},
    {"school": "Scottsdale", "level": "Medium", "sources": "Tampa (Newton), Charlotte (Berry, Sheehy)"},
)
