"""Common Locations - Services.

Idempotent import of Pakistani provinces, districts and tehsils from the
``pakistan-provinces-districts-tehsils.json`` data file.

Every lookup is done against the database right before the insert, so
re-running the import against the same file reuses every row and creates
nothing. Writes are not wrapped in a transaction.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils import timezone

from apps.common.core.exceptions import InvalidLocationData, LocationFileNotFound
from apps.common.utils.string import slugify_name, title_case

from .models import Province, District, Tehsil

logger = logging.getLogger('apps.locations')

BACKUP_TIMESTAMP_FORMAT = '%Y-%m-%d_%H-%M-%S'


class LocationRepository:
    """Find-or-create access to a single location table."""

    def __init__(self, model: Type[models.Model]):
        self.model = model

    def find(self, **criteria) -> Optional[int]:
        """Return the id of the first row matching ``criteria``, or None."""
        return self.model.objects.filter(**criteria).order_by('pk').values_list('pk', flat=True).first()

    def create(self, **fields) -> int:
        return self.model.objects.create(**fields).pk

    def dump(self) -> List[Dict[str, Any]]:
        return list(self.model.objects.order_by('pk').values())


class LocationImportService:
    """
    Import the province -> district -> tehsil hierarchy.

    Provinces and districts are matched by slug first and by title-cased
    name second. Tehsils are matched by (name, district) only; a tehsil whose
    slug is already taken gets the district name appended to it.
    """

    def __init__(
        self,
        provinces: Optional[LocationRepository] = None,
        districts: Optional[LocationRepository] = None,
        tehsils: Optional[LocationRepository] = None,
    ):
        self.provinces = provinces or LocationRepository(Province)
        self.districts = districts or LocationRepository(District)
        self.tehsils = tehsils or LocationRepository(Tehsil)

    @staticmethod
    def new_counts() -> Dict[str, Dict[str, int]]:
        return {
            'provinces': {'created': 0, 'reused': 0},
            'districts': {'created': 0, 'reused': 0},
            'tehsils': {'created': 0, 'skipped': 0},
        }

    @staticmethod
    def load_location_file(path: Union[str, Path]) -> List[Dict[str, Any]]:
        """
        Read the data file and return its ``provinces`` list.

        Raises:
            LocationFileNotFound: the file does not exist
            InvalidLocationData: the file is not JSON or has no "provinces" array
        """
        path = Path(path)
        if not path.is_file():
            raise LocationFileNotFound(str(path))

        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidLocationData(details={'path': str(path), 'error': str(e)})

        if not isinstance(data, dict) or not isinstance(data.get('provinces'), list):
            raise InvalidLocationData(details={'path': str(path)})

        return data['provinces']

    def create_backup(self, backup_dir: Union[str, Path]) -> Path:
        """Dump all three tables to ``<entity>_<timestamp>.json`` files."""
        backup_dir = Path(backup_dir)
        backup_dir.mkdir(parents=True, exist_ok=True)

        timestamp = timezone.localtime().strftime(BACKUP_TIMESTAMP_FORMAT)
        for entity, repository in (
            ('provinces', self.provinces),
            ('districts', self.districts),
            ('tehsils', self.tehsils),
        ):
            target = backup_dir / f'{entity}_{timestamp}.json'
            target.write_text(json.dumps(repository.dump(), cls=DjangoJSONEncoder), encoding='utf-8')

        logger.info(f"Backup of existing location data created at {backup_dir}")
        return backup_dir

    def resolve_province(self, name: str, counts: Optional[Dict] = None) -> int:
        """Find-or-create a province by slug, then by title-cased name."""
        counts = counts if counts is not None else self.new_counts()
        slug = slugify_name(name)

        province_id = self.provinces.find(slug=slug)
        if province_id is not None:
            logger.info(f"Province with slug {slug} already exists. Using existing province.")
            counts['provinces']['reused'] += 1
            return province_id

        province_id = self.provinces.find(name=title_case(name))
        if province_id is not None:
            logger.info(f"Province with name {name} already exists. Using existing province.")
            counts['provinces']['reused'] += 1
            return province_id

        province_id = self.provinces.create(name=title_case(name), slug=slug)
        counts['provinces']['created'] += 1
        logger.info(f"Created new province: {title_case(name)}")
        return province_id

    def resolve_districts(
        self,
        districts: List[Dict[str, Any]],
        province_id: int,
        province_name: str,
        counts: Optional[Dict] = None,
    ) -> Dict[str, int]:
        """
        Find-or-create the districts of one province and import their tehsils.

        The slug lookup is not scoped to the province: a district whose slug
        already exists anywhere is reused as-is, even under another province.

        Returns:
            Mapping of input district name -> district id for this province
        """
        counts = counts if counts is not None else self.new_counts()
        district_map: Dict[str, int] = {}

        for district_data in districts:
            district_name = district_data['name']
            slug = slugify_name(district_name)

            district_id = self.districts.find(slug=slug)
            if district_id is not None:
                logger.info(f"Using existing district with slug: {slug}")
                counts['districts']['reused'] += 1
            else:
                district_id = self.districts.find(name=title_case(district_name), province_id=province_id)
                if district_id is not None:
                    logger.info(f"Using existing district: {district_name} in province: {title_case(province_name)}")
                    counts['districts']['reused'] += 1
                else:
                    district_id = self.districts.create(
                        name=title_case(district_name),
                        slug=slug,
                        province_id=province_id,
                    )
                    counts['districts']['created'] += 1
                    logger.info(
                        f"Created new district: {title_case(district_name)} in province: {title_case(province_name)}"
                    )
            district_map[district_name] = district_id

            tehsils = district_data.get('tehsils')
            if isinstance(tehsils, list):
                self.resolve_tehsils(tehsils, district_id, district_name, counts)

        return district_map

    def resolve_tehsils(
        self,
        tehsils: List[str],
        district_id: int,
        district_name: str,
        counts: Optional[Dict] = None,
    ) -> int:
        """
        Create the tehsils of one district that do not exist there yet.

        A taken slug is retried once as "<tehsil>-<district>"; that second
        slug is not checked, so a further collision raises IntegrityError.

        Returns:
            Number of tehsils created
        """
        counts = counts if counts is not None else self.new_counts()
        created = 0

        for tehsil_name in tehsils:
            if self.tehsils.find(name=title_case(tehsil_name), district_id=district_id) is not None:
                logger.info(f"Skipping existing tehsil: {tehsil_name} in district: {title_case(district_name)}")
                counts['tehsils']['skipped'] += 1
                continue

            slug = slugify_name(tehsil_name)
            if self.tehsils.find(slug=slug) is not None:
                slug = slugify_name(f'{tehsil_name}-{district_name}')
                logger.info(
                    f"Creating unique slug for duplicate tehsil: {tehsil_name} "
                    f"in {district_name} district. New slug: {slug}"
                )

            self.tehsils.create(name=title_case(tehsil_name), slug=slug, district_id=district_id)
            created += 1
            counts['tehsils']['created'] += 1
            logger.info(f"Created new tehsil: {title_case(tehsil_name)} in district: {title_case(district_name)}")

        return created

    def import_locations(self, provinces: List[Dict[str, Any]]) -> Dict[str, Dict[str, int]]:
        """
        Resolve every province, district and tehsil in input order.

        Returns:
            Dict with counts, e.g. {'provinces': {'created': x, 'reused': y}, ...}
        """
        counts = self.new_counts()
        province_map: Dict[str, int] = {}

        for province_data in provinces:
            province_name = province_data['name']
            province_map[province_name] = self.resolve_province(province_name, counts)

            districts = province_data.get('districts')
            if isinstance(districts, list):
                self.resolve_districts(districts, province_map[province_name], province_name, counts)

        return counts

    def run(self, path: Union[str, Path], backup_dir: Union[str, Path]) -> Dict[str, Dict[str, int]]:
        """Load the data file, back up the current tables, then import."""
        provinces = self.load_location_file(path)
        self.create_backup(backup_dir)

        logger.info(f"Starting to seed Pakistan location data from {Path(path).name}...")
        counts = self.import_locations(provinces)
        logger.info(f"Pakistan location data seeded successfully: {counts}")
        return counts
