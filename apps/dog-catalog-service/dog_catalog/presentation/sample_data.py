"""Fixed sample catalog shown when the API cannot be reached."""
from datetime import datetime, timezone

from dog_catalog.db import schemas


def _photo(photo_id: str, size: str) -> str:
    return f"https://images.unsplash.com/{photo_id}?{size}&fit=crop"


def _sample(id, name, breed, description, photo_id, age, is_featured, created_at):
    return schemas.Dog(
        id=id,
        name=name,
        breed=breed,
        description=description,
        logo_url=_photo(photo_id, "w=100&h=100") + "&crop=faces",
        photo_url=_photo(photo_id, "w=400&h=300"),
        age=age,
        is_featured=is_featured,
        created_at=datetime(*created_at, tzinfo=timezone.utc),
    )


SAMPLE_DOGS = (
    _sample(1, "Buddy", "Golden Retriever",
            "A friendly and energetic golden retriever who loves playing fetch and swimming.",
            "photo-1552053831-71594a27632d", 3, True, (2024, 1, 15)),
    _sample(2, "Luna", "Border Collie",
            "Intelligent and agile, Luna excels at agility training and herding activities.",
            "photo-1551717743-49959800b1f6", 2, False, (2024, 2, 1)),
    _sample(3, "Max", "German Shepherd",
            "Loyal and protective, Max is a great companion for active families.",
            "photo-1589941013453-ec89f33b5e95", 5, True, (2024, 1, 20)),
    _sample(4, "Bella", "Labrador",
            "Sweet and gentle, Bella loves children and is perfect for family activities.",
            "photo-1518717758536-85ae29035b6d", 4, False, (2024, 1, 25)),
    _sample(5, "Charlie", "Beagle",
            "Curious and friendly, Charlie has an amazing sense of smell and loves exploring.",
            "photo-1544717297-fa95b6ee9643", 3, True, (2024, 2, 5)),
    _sample(6, "Daisy", "Poodle",
            "Elegant and smart, Daisy is hypoallergenic and loves learning new tricks.",
            "photo-1616190267687-b7ebf74cf3d4", 2, False, (2024, 2, 10)),
    _sample(7, "Rocky", "Bulldog",
            "Sturdy and calm, Rocky is a gentle giant who loves relaxing and short walks.",
            "photo-1583337130417-3346a1be7dee", 6, False, (2024, 1, 30)),
    _sample(8, "Sophie", "Husky",
            "Energetic and adventurous, Sophie loves cold weather and long hikes.",
            "photo-1605568427561-40dd23c2acea", 4, True, (2024, 1, 28)),
)
