from itinerary_viewer.domain.models import ItineraryRecord, ItinerarySet
from itinerary_viewer.itinerary.parser import parse_itinerary
from itinerary_viewer.itinerary.query import day_labels, default_day, filter_by_day


def _itinerary(*days: str) -> ItinerarySet:
    rows = [f"{day},{i}" for i, day in enumerate(days)]
    return parse_itinerary("\n".join(["Día,Hora"] + rows))


def test_day_labels_keep_first_appearance_order():
    assert day_labels(_itinerary("B", "A", "A", "B")) == ("B", "A")


def test_day_labels_are_not_sorted():
    labels = day_labels(_itinerary("Martes", "Domingo", "Lunes"))

    assert labels == ("Martes", "Domingo", "Lunes")


def test_every_record_day_is_a_label(sample_csv):
    itinerary = parse_itinerary(sample_csv)

    assert all(record.day in itinerary.day_labels for record in itinerary)


def test_filter_returns_matching_records_in_order():
    itinerary = _itinerary("A", "B", "A")

    result = filter_by_day(itinerary, "A")

    assert [r.time for r in result] == ["0", "2"]


def test_filter_with_absent_label_is_empty():
    assert filter_by_day(_itinerary("A", "B"), "C") == ()


def test_filter_is_case_sensitive():
    assert filter_by_day(_itinerary("Lunes"), "lunes") == ()


def test_filter_on_records_without_day_column():
    itinerary = ItinerarySet(
        records=(ItineraryRecord.from_mapping({"Hora": "9:00"}),),
    )

    assert itinerary.day_labels == ("",)
    assert len(filter_by_day(itinerary, "")) == 1


def test_default_day_is_first_label():
    assert default_day(_itinerary("Lunes", "Domingo"), "Domingo") == "Lunes"


def test_default_day_falls_back_when_empty():
    assert default_day(parse_itinerary("Día,Hora"), "Domingo") == "Domingo"
