"""
Mock Applicant Provider.

A fake data source for development and testing. Generates a
deterministic applicant collection whose status mix, dates and
status-specific fields look like a live recruiting pipeline.
"""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import Dict, List, Optional

from onboarding_pipeline.config.models import DEFAULT_STATUS_DISTRIBUTION, MockDataConfig
from onboarding_pipeline.domain.entities import Applicant, Location, OnboardingStatus

logger = logging.getLogger(__name__)


class MockApplicantProvider:
    """Fake applicant source for development and testing."""

    FIRST_NAMES = [
        "Marcus", "David", "Alex", "James", "Michael", "Christopher", "Matthew",
        "Daniel", "Joshua", "Andrew", "Kenneth", "Steven", "Brian", "Kevin",
        "Jason", "Ryan", "Jacob", "Nicholas", "Eric", "Jonathan", "Tyler",
        "Benjamin", "Samuel", "Aaron", "Jose", "Henry", "Nathan", "Noah",
        "Sarah", "Jessica", "Emily", "Maria", "Ashley", "Jennifer", "Lisa",
        "Amanda", "Michelle", "Kimberly", "Susan", "Karen", "Helen", "Sandra",
        "Anna", "Rebecca", "Laura", "Rachel", "Catherine", "Elizabeth",
        "Linda", "Patricia", "Christine", "Samantha", "Stephanie", "Dorothy",
    ]

    LAST_NAMES = [
        "Johnson", "Chen", "Rodriguez", "Kim", "Walker", "Thompson", "Santos",
        "Wilson", "Martinez", "Anderson", "Taylor", "Thomas", "Hernandez",
        "Moore", "Martin", "Jackson", "Garcia", "Miller", "Davis", "Lopez",
        "Gonzalez", "Williams", "Jones", "Brown", "Smith", "White", "Lewis",
        "Robinson", "Clark", "Hall", "Allen", "Young", "King", "Wright",
        "Scott", "Green", "Baker", "Adams", "Nelson", "Carter", "Mitchell",
        "Perez", "Roberts", "Turner", "Phillips", "Campbell", "Parker",
        "Evans", "Edwards", "Collins", "Stewart", "Sanchez", "Morris",
        "Rogers", "Reed", "Cook", "Morgan", "Bell", "Murphy", "Bailey",
    ]

    JOB_TITLES = [
        "Customer Service Representative",
        "Customer Experience Specialist",
        "Data Entry Specialist",
        "Technical Support Agent",
        "Customer Success Associate",
        "Help Desk Technician",
        "Virtual Assistant",
        "Customer Care Specialist",
    ]

    EXPERIENCES = [
        "New to customer service",
        "6 months call center experience",
        "1 year retail customer service",
        "2 years customer support experience",
        "3 years technical support experience",
        "4 years data entry experience",
        "5 years customer service experience",
        "No prior customer service experience",
        "1 year help desk experience",
        "2 years virtual assistant experience",
        "3 years customer experience specialist",
        "1 year data processing experience",
        "2 years online chat support",
        "3 years phone customer service",
        "4 years remote customer support",
        "1 year CRM system experience",
    ]

    # (city, region, country)
    LOCATIONS = [
        ("Toronto", "Ontario", "Canada"),
        ("Vancouver", "British Columbia", "Canada"),
        ("Montreal", "Quebec", "Canada"),
        ("Calgary", "Alberta", "Canada"),
        ("Ottawa", "Ontario", "Canada"),
        ("Edmonton", "Alberta", "Canada"),
        ("Mississauga", "Ontario", "Canada"),
        ("Winnipeg", "Manitoba", "Canada"),
        ("Hamilton", "Ontario", "Canada"),
        ("Quebec City", "Quebec", "Canada"),
        ("New York", "New York", "United States"),
        ("Los Angeles", "California", "United States"),
        ("Chicago", "Illinois", "United States"),
        ("Houston", "Texas", "United States"),
        ("Phoenix", "Arizona", "United States"),
        ("Philadelphia", "Pennsylvania", "United States"),
        ("San Antonio", "Texas", "United States"),
        ("San Diego", "California", "United States"),
        ("Dallas", "Texas", "United States"),
        ("Austin", "Texas", "United States"),
        ("Jacksonville", "Florida", "United States"),
        ("San Francisco", "California", "United States"),
        ("Columbus", "Ohio", "United States"),
        ("Indianapolis", "Indiana", "United States"),
        ("Fort Worth", "Texas", "United States"),
        ("Charlotte", "North Carolina", "United States"),
        ("Seattle", "Washington", "United States"),
        ("Denver", "Colorado", "United States"),
        ("Boston", "Massachusetts", "United States"),
        ("El Paso", "Texas", "United States"),
        ("Cape Town", "Western Cape", "South Africa"),
        ("Johannesburg", "Gauteng", "South Africa"),
        ("Durban", "KwaZulu-Natal", "South Africa"),
        ("Pretoria", "Gauteng", "South Africa"),
        ("Port Elizabeth", "Eastern Cape", "South Africa"),
        ("Bloemfontein", "Free State", "South Africa"),
        ("East London", "Eastern Cape", "South Africa"),
        ("Nelspruit", "Mpumalanga", "South Africa"),
        ("Polokwane", "Limpopo", "South Africa"),
        ("Kimberley", "Northern Cape", "South Africa"),
        ("Belgrade", "Central Serbia", "Serbia"),
        ("Novi Sad", "Vojvodina", "Serbia"),
        ("Niš", "Southern and Eastern Serbia", "Serbia"),
        ("Kragujevac", "Central Serbia", "Serbia"),
        ("Subotica", "Vojvodina", "Serbia"),
        ("Novi Pazar", "Southern and Eastern Serbia", "Serbia"),
        ("Zrenjanin", "Vojvodina", "Serbia"),
        ("Pančevo", "Vojvodina", "Serbia"),
        ("Čačak", "Central Serbia", "Serbia"),
        ("Novi Beograd", "Central Serbia", "Serbia"),
        ("Zagreb", "Central Croatia", "Croatia"),
        ("Split", "Dalmatia", "Croatia"),
        ("Rijeka", "Primorje-Gorski Kotar", "Croatia"),
        ("Osijek", "Slavonia", "Croatia"),
        ("Zadar", "Dalmatia", "Croatia"),
        ("Slavonski Brod", "Slavonia", "Croatia"),
        ("Pula", "Istria", "Croatia"),
        ("Karlovac", "Central Croatia", "Croatia"),
        ("Sisak", "Central Croatia", "Croatia"),
        ("Šibenik", "Dalmatia", "Croatia"),
        ("Casablanca", "Casablanca-Settat", "Morocco"),
        ("Rabat", "Rabat-Salé-Kénitra", "Morocco"),
        ("Fez", "Fès-Meknès", "Morocco"),
        ("Marrakech", "Marrakech-Safi", "Morocco"),
        ("Agadir", "Souss-Massa", "Morocco"),
        ("Tangier", "Tanger-Tetouan-Al Hoceima", "Morocco"),
        ("Meknès", "Fès-Meknès", "Morocco"),
        ("Oujda", "Oriental", "Morocco"),
        ("Kenitra", "Rabat-Salé-Kénitra", "Morocco"),
        ("Tetouan", "Tanger-Tetouan-Al Hoceima", "Morocco"),
        ("Mexico City", "Mexico City", "Mexico"),
        ("Guadalajara", "Jalisco", "Mexico"),
        ("Monterrey", "Nuevo León", "Mexico"),
        ("Puebla", "Puebla", "Mexico"),
        ("Tijuana", "Baja California", "Mexico"),
        ("León", "Guanajuato", "Mexico"),
        ("Juárez", "Chihuahua", "Mexico"),
        ("Torreón", "Coahuila", "Mexico"),
        ("Querétaro", "Querétaro", "Mexico"),
        ("San Luis Potosí", "San Luis Potosí", "Mexico"),
        ("Mérida", "Yucatán", "Mexico"),
        ("Mexicali", "Baja California", "Mexico"),
    ]

    INTERVIEW_TIMES = [
        "Monday, Aug 19 at 10:00 AM",
        "Tuesday, Aug 20 at 2:00 PM",
        "Wednesday, Aug 21 at 11:00 AM",
        "Thursday, Aug 22 at 9:00 AM",
        "Friday, Aug 23 at 3:00 PM",
        "Monday, Aug 26 at 1:00 PM",
        "Tuesday, Aug 27 at 10:30 AM",
        "Wednesday, Aug 28 at 3:30 PM",
    ]

    TRAINING_SESSIONS = [
        "Customer Service Fundamentals: Aug 26-27",
        "Technical Support Basics: Aug 28-29",
        "CX Excellence Program: Sep 2-3",
        "Data Entry & CRM Training: Sep 5-6",
        "Advanced Customer Relations: Sep 9-10",
        "Digital Communication Skills: Sep 12-13",
    ]

    DECLINE_REASONS = [
        "Insufficient communication skills for customer service role",
        "Failed background check",
        "Did not meet interview standards for technical support",
        "Incomplete application or missing documentation",
        "Not available for required shift hours",
    ]

    # Share of applicants holding each certification
    CERTIFICATION_RATES = [
        ("Driver License", 0.8),
        ("Background Check", 0.7),
        ("Vehicle Owner", 0.5),
        ("Food Safety", 0.3),
        ("First Aid", 0.2),
        ("Bilingual", 0.4),
    ]

    def __init__(
        self,
        seed: int = 42,
        count: int = 300,
        reference_date: Optional[date] = None,
        lookback_days: int = 45,
        config: Optional[MockDataConfig] = None,
    ) -> None:
        """
        Initialize mock provider.

        Args:
            seed: Random seed for reproducibility
            count: Number of applicants to generate
            reference_date: "Today" for generated dates (default: system date)
            lookback_days: Applied dates fall within this many days
            config: Mock data configuration; overrides seed, count and
                    lookback_days when given
        """
        self.config = config or MockDataConfig(
            seed=seed, count=count, lookback_days=lookback_days
        )
        self.reference_date = reference_date or date.today()
        self._rng = random.Random(self.config.seed)
        self._applicants: Optional[List[Applicant]] = None

    def get_applicants(self) -> List[Applicant]:
        """Get the generated applicants (generated once, then cached)."""
        if self._applicants is None:
            self._applicants = self._generate_applicants()
            logger.info(
                f"Generated {len(self._applicants)} mock applicants "
                f"(seed={self.config.seed})"
            )
        return list(self._applicants)

    # =========================================================================
    # Generation
    # =========================================================================

    def _status_plan(self) -> List[OnboardingStatus]:
        """
        Statuses in generation order, scaled to the requested count.

        Uses the largest-remainder method so the plan always has exactly
        `count` entries.
        """
        weights = self.config.status_distribution or dict(DEFAULT_STATUS_DISTRIBUTION)
        total_weight = sum(weights.values())
        count = self.config.count
        if total_weight == 0 or count == 0:
            return [OnboardingStatus.APPLIED] * count

        exact = {s: count * w / total_weight for s, w in weights.items()}
        allotted: Dict[OnboardingStatus, int] = {s: int(v) for s, v in exact.items()}
        shortfall = count - sum(allotted.values())
        by_remainder = sorted(exact, key=lambda s: exact[s] - allotted[s], reverse=True)
        for status in by_remainder[:shortfall]:
            allotted[status] += 1

        plan: List[OnboardingStatus] = []
        for status in OnboardingStatus:
            plan.extend([status] * allotted.get(status, 0))
        return plan

    def _generate_applicants(self) -> List[Applicant]:
        return [
            self._generate_applicant(index, status)
            for index, status in enumerate(self._status_plan())
        ]

    def _generate_applicant(self, index: int, status: OnboardingStatus) -> Applicant:
        rng = self._rng
        today = self.reference_date

        first = rng.choice(self.FIRST_NAMES)
        last = rng.choice(self.LAST_NAMES)
        city, region, country = rng.choice(self.LOCATIONS)

        applied = today - timedelta(days=rng.randrange(self.config.lookback_days))
        if status == OnboardingStatus.APPLIED:
            changed = applied
        else:
            changed = self._status_change_date(applied)

        interview_time = training_session = notes = None
        if status == OnboardingStatus.INTERVIEW_SCHEDULED:
            interview_time = rng.choice(self.INTERVIEW_TIMES)
        elif status in (OnboardingStatus.INVITED_TO_TRAINING, OnboardingStatus.IN_TRAINING):
            training_session = rng.choice(self.TRAINING_SESSIONS)
        elif status == OnboardingStatus.DECLINED:
            notes = rng.choice(self.DECLINE_REASONS)

        rating = None
        if rng.random() < self.config.rated_fraction:
            rating = round(rng.uniform(1.0, 5.0), 1)

        return Applicant(
            id=str(index + 1),
            name=f"{first} {last}",
            email=f"{first.lower()}.{last.lower()}@email.com",
            phone=f"+1 (555) {rng.randint(100, 999)}-{rng.randint(1000, 9999)}",
            job_title=rng.choice(self.JOB_TITLES),
            experience=rng.choice(self.EXPERIENCES),
            status=status,
            applied_date=applied,
            last_status_change_date=changed,
            interview_time=interview_time,
            training_session=training_session,
            notes=notes,
            rating=rating,
            location=Location(city=city, region=region, country=country),
            certifications=tuple(
                name for name, rate in self.CERTIFICATION_RATES if rng.random() < rate
            ),
        )

    def _status_change_date(self, applied: date) -> date:
        """A recent date on or after the applied date."""
        days_since_applied = (self.reference_date - applied).days
        window = min(days_since_applied, self.config.status_change_window_days)
        days_ago = self._rng.randrange(window) if window > 0 else 0
        return self.reference_date - timedelta(days=days_ago)
