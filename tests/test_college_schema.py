from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from client.app.schemas.college import CategoryCount, College, CollegeFilters, CollegeStats


def college_json(**overrides):
    data = {
        "id": "col-1",
        "name": "Riverside College",
        "code": "RVC",
        "address": "12 Mill Road",
        "phone": "555-0100",
        "email": "office@riverside.edu",
        "website": "https://riverside.edu",
        "logo_url": "https://cdn.example.com/rvc.png",
        "is_active": True,
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-02-01T08:00:00Z",
    }
    data.update(overrides)
    return data


def test_from_json_reads_every_field():
    college = College.from_json(college_json())
    assert college.id == "col-1"
    assert college.code == "RVC"
    assert college.logo_url == "https://cdn.example.com/rvc.png"
    assert college.created_at == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
    assert college.status_text == "Active"


def test_missing_optional_strings_default_to_empty():
    data = college_json()
    for key in ("address", "phone", "website", "logo_url", "is_active"):
        data.pop(key)
    college = College.from_json(data)
    assert college.address == ""
    assert college.phone == ""
    assert college.website == ""
    assert college.logo_url is None
    assert college.is_active is True


def test_null_optional_values_use_defaults():
    college = College.from_json(college_json(address=None, phone=None, is_active=None))
    assert college.address == ""
    assert college.phone == ""
    assert college.is_active is True


@pytest.mark.parametrize("missing", ["id", "email", "created_at"])
def test_missing_required_field_fails(missing):
    data = college_json()
    data.pop(missing)
    with pytest.raises(ValidationError):
        College.from_json(data)


def test_wrong_type_for_required_field_fails():
    with pytest.raises(ValidationError):
        College.from_json(college_json(id=42))
    with pytest.raises(ValidationError):
        College.from_json(college_json(email=None))


def test_to_json_round_trips_declared_fields():
    source = college_json(extra_key="dropped")
    data = College.from_json(source).to_json()
    assert "extra_key" not in data
    for key in ("id", "name", "code", "address", "phone", "email", "website", "logo_url", "is_active"):
        assert data[key] == source[key]
    assert College.from_json(data).created_at == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)


def test_copy_with_keeps_other_fields_and_receiver():
    college = College.from_json(college_json())
    renamed = college.copy_with(name="Riverside University", is_active=False)
    assert renamed.name == "Riverside University"
    assert renamed.is_active is False
    assert renamed.status_text == "Inactive"
    assert renamed.code == college.code
    assert renamed.email == college.email
    assert college.name == "Riverside College"
    assert college.is_active is True


def test_copy_with_rejects_unknown_field_names():
    college = College.from_json(college_json())
    with pytest.raises(TypeError, match="isActive"):
        college.copy_with(isActive=False)
    with pytest.raises(TypeError, match="nickname"):
        college.copy_with(nickname="RC")


def test_copy_with_validates_new_values():
    college = College.from_json(college_json())
    with pytest.raises(ValidationError):
        college.copy_with(is_active="not-a-bool")
    with pytest.raises(ValidationError):
        college.copy_with(created_at="yesterday")
    assert college.is_active is True


def test_to_json_keeps_millisecond_timestamps():
    source = college_json(created_at="2024-01-15T10:30:00.123Z", updated_at="2024-02-01T08:00:00.000Z")
    data = College.from_json(source).to_json()
    assert data["created_at"] == "2024-01-15T10:30:00.123Z"
    assert data["updated_at"] == "2024-02-01T08:00:00.000Z"


def test_to_json_writes_utc_with_milliseconds():
    data = College.from_json(college_json(created_at="2024-01-15T12:30:00.5+02:00")).to_json()
    assert data["created_at"] == "2024-01-15T10:30:00.500Z"
    assert College.from_json(college_json()).to_json()["updated_at"] == "2024-02-01T08:00:00.000Z"


def test_equality_is_by_id_only():
    college = College.from_json(college_json())
    assert college == college.copy_with(name="Other")
    assert college != College.from_json(college_json(id="col-2"))
    assert len({college, college.copy_with(code="X")}) == 1


def test_college_is_immutable():
    college = College.from_json(college_json())
    with pytest.raises(ValidationError):
        college.name = "Changed"


def test_college_stats_flattens_counters():
    stats = CollegeStats.from_json(
        {
            "college": college_json(),
            "stats": {"totalStudents": 120, "totalAdmins": 3, "totalBooks": 540, "totalUsers": 123},
            "booksByCategory": [{"category": "Science", "count": 200}, {"category": "Arts", "count": 40}],
            "recentUsers": [{"id": "u1"}],
            "recentBooks": [{"id": "b1", "title": "Optics"}],
        }
    )
    assert stats.college.id == "col-1"
    assert stats.total_students == 120
    assert stats.total_admins == 3
    assert stats.total_books == 540
    assert stats.total_users == 123
    assert stats.books_by_category == [CategoryCount(category="Science", count=200), CategoryCount(category="Arts", count=40)]
    assert stats.recent_users == [{"id": "u1"}]
    assert stats.recent_books[0]["title"] == "Optics"


def test_college_stats_counts_default_to_zero():
    stats = CollegeStats.from_json({"college": college_json()})
    assert (stats.total_students, stats.total_admins, stats.total_books, stats.total_users) == (0, 0, 0, 0)
    assert stats.books_by_category == []
    assert stats.recent_users == []
    assert stats.recent_books == []

    partial = CollegeStats.from_json({"college": college_json(), "stats": {"totalBooks": 7}})
    assert partial.total_books == 7
    assert partial.total_students == 0


def test_college_stats_to_json_restores_nesting():
    source = {
        "college": college_json(),
        "stats": {"totalStudents": 1, "totalAdmins": 2, "totalBooks": 3, "totalUsers": 4},
        "booksByCategory": [{"category": "Maths", "count": 3}],
        "recentUsers": [],
        "recentBooks": [{"id": "b9"}],
    }
    data = CollegeStats.from_json(source).to_json()
    assert data["stats"] == source["stats"]
    assert data["booksByCategory"] == source["booksByCategory"]
    assert data["recentBooks"] == source["recentBooks"]
    assert data["college"]["id"] == "col-1"


def test_category_count_requires_both_fields():
    with pytest.raises(ValidationError):
        CategoryCount.from_json({"category": "Science"})


def test_college_filters_defaults_and_query_params():
    empty = CollegeFilters()
    assert empty.has_filters is False
    assert empty.to_query_params() == {}

    searching = CollegeFilters(search="x")
    assert searching.has_filters is True
    assert searching.to_query_params() == {"search": "x"}


def test_college_filters_omit_empty_values():
    filters = CollegeFilters(search="", status="active")
    assert filters.has_filters is True
    assert filters.to_query_params() == {"status": "active"}


def test_college_filters_copy_with_and_clear():
    filters = CollegeFilters(search="river").copy_with(status="inactive")
    assert filters.search == "river"
    assert filters.status == "inactive"
    cleared = filters.clear()
    assert cleared.has_filters is False
    assert filters.has_filters is True
