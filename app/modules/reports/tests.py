"""
Tests para el módulo de Reportes

Cubren:
- Filtro de periodos (extremos inclusivos, presets, semana ISO)
- Distribución de ganancias por tipo de sede (suma de hojas, pérdidas, residuo)
- Tabla de comisiones y barbero principal
- Reportes financieros y de barberos sobre datos en memoria
- Endpoints de reportes sobre la base de datos
"""

import math
from datetime import date, datetime, timedelta

import pytest

from app.common.validators import InvalidAmountError
from app.modules.locations.models import LocationKind
from app.modules.reports.utils.periods import DateRange, filter_by_period, week_range
from app.modules.reports.utils import prepare_distribution_csv, format_csv_value
from app.modules.reports.services.base import InMemoryPeriodDataRepository, BaseReportService
from app.modules.reports.services.distribution import (
    PartnerWeight,
    ProfitDistributionConfig,
    UnsupportedLocationKindError,
    calculate_profit_distribution,
)
from app.modules.reports.services.commission import (
    CommissionTier,
    DEFAULT_COMMISSION_TIERS,
    get_commission_tiers,
    calculate_commission,
    qualifying_totals,
    resolve_commission_tier,
)
from app.modules.reports.services import (
    BarberReportService,
    FinancialReportService,
    ProfitDistributionService,
)


ALL_KINDS = list(LocationKind)


# ===== FIXTURES =====

@pytest.fixture
def even_partners_config():
    """Tres socios que suman exactamente 100%"""
    return ProfitDistributionConfig(
        partners=(
            PartnerWeight("Engel", 50.0),
            PartnerWeight("Roy", 30.0),
            PartnerWeight("Katherine", 20.0),
        )
    )


@pytest.fixture
def march_data():
    """Movimientos de MAGALLANES en marzo 2024 con registros en los bordes del mes"""
    haircut = {"item_id": "corte", "name": "Corte", "price": 20.0, "quantity": 1,
               "type": "service", "category": "barberia"}
    beard = {"item_id": "barba", "name": "Barba", "price": 10.0, "quantity": 2,
             "type": "service", "category": "nordico"}
    console = {"item_id": "ps5", "name": "PS5 1h", "price": 5.0, "quantity": 1,
               "type": "service", "category": "zona gamer"}
    soda = {"item_id": "refresco", "name": "Refresco", "price": 2.0, "quantity": 3,
            "type": "product", "category": "Snack"}
    coffee = {"item_id": "cafe", "name": "Café", "price": 0.0, "quantity": 1,
              "type": "product", "category": "Cortesía"}

    return {
        "MAGALLANES": {
            "transactions": [
                {"id": 1, "barber_id": "b1", "total_amount": 40.0, "payment_method": "Efectivo USD",
                 "end_time": datetime(2024, 3, 1, 0, 0, 0), "items": [haircut, beard]},
                {"id": 2, "barber_id": "b1", "total_amount": 11.0, "payment_method": "Pago Móvil",
                 "end_time": datetime(2024, 3, 31, 23, 59, 59, 999000), "items": [console, soda, coffee]},
                {"id": 3, "barber_id": "b2", "total_amount": 20.0, "payment_method": "Pago Móvil",
                 "end_time": datetime(2024, 3, 15, 12, 0), "items": [haircut]},
                {"id": 4, "barber_id": "b1", "total_amount": 500.0, "payment_method": "Tarjeta",
                 "end_time": datetime(2024, 2, 29, 23, 59, 59, 999000), "items": [haircut]},
                {"id": 5, "barber_id": "b2", "total_amount": 500.0, "payment_method": "Tarjeta",
                 "end_time": datetime(2024, 4, 1, 0, 0, 0), "items": [haircut]},
            ],
            "expenses": [
                {"amount": 15.0, "category": "Suministros", "timestamp": datetime(2024, 3, 10, 9, 0)},
                {"amount": 999.0, "category": "Alquiler", "timestamp": datetime(2024, 4, 1, 0, 0)},
            ],
            "other_incomes": [
                {"amount": 100.0, "category": "Venta de Activo", "timestamp": datetime(2024, 3, 5, 10, 0)},
            ],
        }
    }


@pytest.fixture
def march():
    return DateRange(date(2024, 3, 1), date(2024, 3, 31))


# ===== TESTS DE PERIODOS =====

class TestDateRange:
    """Tests para el filtro de periodos"""

    def test_bounds_expand_to_whole_days(self, march):
        assert march.start_bound() == datetime(2024, 3, 1, 0, 0, 0, 0)
        assert march.end_bound() == datetime(2024, 3, 31, 23, 59, 59, 999000)

    def test_inclusive_bounds_one_millisecond(self, march):
        """Los extremos se incluyen; un milisegundo afuera se excluye"""
        start = march.start_bound()
        end = march.end_bound()
        one_ms = timedelta(milliseconds=1)

        assert march.contains(start)
        assert march.contains(end)
        assert not march.contains(start - one_ms)
        assert not march.contains(end + one_ms)

    def test_unbounded_sides(self):
        assert DateRange().contains(datetime(1999, 1, 1))
        assert DateRange(start_date=date(2024, 1, 1)).contains(datetime(2030, 1, 1))
        assert not DateRange(end_date=date(2024, 1, 1)).contains(datetime(2024, 1, 2))

    def test_records_without_date_excluded_from_bounded_range(self, march):
        records = [{"end_time": None}, {"end_time": datetime(2024, 3, 2)}]
        assert filter_by_period(records, march, "end_time") == [records[1]]
        assert filter_by_period(records, DateRange(), "end_time") == records

    def test_presets(self):
        today = date(2024, 2, 14)
        assert DateRange.from_preset("today", today) == DateRange(today, today)
        assert DateRange.from_preset("month", today) == DateRange(date(2024, 2, 1), date(2024, 2, 29))
        assert DateRange.from_preset("year", today) == DateRange(date(2024, 1, 1), date(2024, 12, 31))

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            DateRange.from_preset("week")

    def test_resolve_rejects_inverted_range(self):
        with pytest.raises(ValueError):
            DateRange.resolve(date(2024, 3, 2), date(2024, 3, 1))

    def test_preset_takes_priority(self):
        today = date(2024, 5, 20)
        resolved = DateRange.resolve(date(2020, 1, 1), date(2020, 1, 2), "today", today)
        assert resolved == DateRange(today, today)

    def test_week_range_for_sunday(self):
        """Un domingo pertenece a la semana que empezó el lunes anterior"""
        start, end = week_range(datetime(2024, 3, 10, 18, 30))
        assert start == datetime(2024, 3, 4, 0, 0)
        assert end == datetime(2024, 3, 10, 23, 59, 59, 999000)

    def test_week_range_for_monday(self):
        start, end = week_range(datetime(2024, 3, 4, 0, 0))
        assert start == datetime(2024, 3, 4, 0, 0)
        assert end.date() == date(2024, 3, 10)


# ===== TESTS DE DISTRIBUCIÓN =====

class TestProfitDistribution:
    """Tests para el calculador de distribución de ganancias"""

    @pytest.mark.parametrize("kind", ALL_KINDS)
    @pytest.mark.parametrize("net_profit", [1000.0, -1000.0, 0.0, 1234.56, 0.01])
    def test_leaves_sum_to_net_profit(self, kind, net_profit):
        """La suma de las hojas es la ganancia neta, con la configuración por defecto"""
        result = calculate_profit_distribution(net_profit, kind)
        assert result.leaf_total() == pytest.approx(net_profit, abs=1e-9)

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_leaves_sum_with_even_partners(self, kind, even_partners_config):
        result = calculate_profit_distribution(777.77, kind, even_partners_config)
        assert result.leaf_total() == pytest.approx(777.77)
        assert result.unallocated_amount == pytest.approx(0.0, abs=1e-9)
        assert result.warnings == []

    def test_standard_branch_example(self):
        """$1000 en sucursal: socios 39.96 c/u y 0.12 sin asignar"""
        result = calculate_profit_distribution(1000.0, LocationKind.STANDARD_BRANCH)

        assert result.local_share == pytest.approx(500.0)
        assert result.head_barber_share == pytest.approx(25.0)
        assert result.branch_net_share == pytest.approx(475.0)
        assert result.distribution_share == pytest.approx(500.0)
        assert result.franchisee_share == pytest.approx(300.0)
        assert result.partners_pool == pytest.approx(200.0)
        assert result.partners_share == pytest.approx(120.0)
        assert result.plant_share == pytest.approx(80.0)
        assert [p.amount for p in result.partners] == pytest.approx([39.96, 39.96, 39.96])
        assert result.unallocated_amount == pytest.approx(0.12)
        assert len(result.warnings) == 1

    def test_secondary_branch_uses_branch_rule(self):
        standard = calculate_profit_distribution(1000.0, LocationKind.STANDARD_BRANCH)
        secondary = calculate_profit_distribution(1000.0, "secondary_branch")
        assert secondary.to_dict()["franchisee_share"] == standard.franchisee_share
        assert secondary.location_kind == LocationKind.SECONDARY_BRANCH

    def test_central_plant_splits_distribution_among_partners(self, even_partners_config):
        result = calculate_profit_distribution(1000.0, LocationKind.CENTRAL_PLANT, even_partners_config)

        assert result.local_share == pytest.approx(500.0)
        assert result.partners_share == pytest.approx(500.0)
        assert [p.amount for p in result.partners] == pytest.approx([250.0, 150.0, 100.0])
        assert result.head_barber_share is None
        assert result.franchisee_share is None
        assert result.plant_share is None

    def test_loss_keeps_sign(self):
        """Las pérdidas se reparten con signo negativo"""
        result = calculate_profit_distribution(-1000.0, LocationKind.STANDARD_BRANCH)
        for name, amount in result.leaves().items():
            assert amount <= 0, name
        assert result.franchisee_share == pytest.approx(-300.0)
        assert result.unallocated_amount == pytest.approx(-0.12)

    @pytest.mark.parametrize("kind", ALL_KINDS)
    @pytest.mark.parametrize("net_profit", [-0.01, -1.0, -1000.0, -1234.56, -1000000.07])
    def test_loss_keeps_sign_with_full_roster(self, kind, net_profit):
        """Con pesos que suman 100 el residuo es 0 y ninguna hoja cambia de signo"""
        config = ProfitDistributionConfig(
            partners=(
                PartnerWeight("Engel", 33.34),
                PartnerWeight("Roy", 33.33),
                PartnerWeight("Katherine", 33.33),
            )
        )
        result = calculate_profit_distribution(net_profit, kind, config)
        for name, amount in result.leaves().items():
            assert amount <= 0, name
        assert result.unallocated_amount == 0.0
        assert result.leaf_total() == pytest.approx(net_profit, rel=1e-9)

    def test_duplicate_partner_names_rejected(self):
        with pytest.raises(ValueError):
            ProfitDistributionConfig(partners=(PartnerWeight("Roy", 50.0), PartnerWeight("Roy", 50.0)))

    def test_zero_profit(self):
        result = calculate_profit_distribution(0, LocationKind.CENTRAL_PLANT)
        assert all(amount == 0 for amount in result.leaves().values())

    def test_no_partners_leaves_share_unallocated(self):
        result = calculate_profit_distribution(1000.0, LocationKind.STANDARD_BRANCH, ProfitDistributionConfig())
        assert result.partners == []
        assert result.unallocated_amount == pytest.approx(120.0)
        assert result.warnings

    def test_unknown_kind(self):
        with pytest.raises(UnsupportedLocationKindError):
            calculate_profit_distribution(1000.0, "kiosk")

    @pytest.mark.parametrize("value", [math.nan, math.inf, None, "1000", True])
    def test_invalid_net_profit(self, value):
        with pytest.raises(InvalidAmountError):
            calculate_profit_distribution(value, LocationKind.STANDARD_BRANCH)

    def test_distribution_csv_rows(self):
        result = calculate_profit_distribution(1000.0, LocationKind.CENTRAL_PLANT)
        rows = prepare_distribution_csv({"location_code": "PSYFN", "distribution": result.to_dict()})
        concepts = [row["concept"] for row in rows]
        assert "franchisee_share" not in concepts
        assert "partner:Engel" in concepts
        assert concepts[-1] == "unallocated_amount"
        assert format_csv_value(166.5) == "166.50"
        assert format_csv_value(True) == "Sí"


# ===== TESTS DE COMISIONES =====

class TestCommissionTiers:
    """Tests para la tabla de niveles"""

    def test_configured_tiers_match_defaults(self):
        assert get_commission_tiers() == list(DEFAULT_COMMISSION_TIERS)

    @pytest.mark.parametrize("count,percentage", [
        (0, 55), (29, 55), (30, 60), (40, 60), (41, 65), (1000, 65),
    ])
    def test_tier_boundaries(self, count, percentage):
        assert resolve_commission_tier(count).percentage == percentage

    def test_zero_services(self):
        resolution = resolve_commission_tier(0)
        assert resolution.services_needed == 30
        assert resolution.next_threshold == 30
        assert resolution.at_max_tier is False

    def test_services_needed_and_progress(self):
        """35 servicios por $700: 60%, $420, faltan 6 para el siguiente nivel"""
        result = calculate_commission("barber", 35, 700.0)
        assert result.percentage == 60
        assert result.commission_earned == pytest.approx(420.0)
        assert result.services_needed == 6
        assert result.next_threshold == 41
        assert result.at_max_tier is False
        assert result.progress == pytest.approx(35 / 41 * 100)

    def test_max_tier(self):
        result = calculate_commission("barber", 50, 1000.0)
        assert result.at_max_tier is True
        assert result.services_needed == 0
        assert result.next_threshold is None
        assert result.progress == 100.0

    def test_head_barber_fixed_percentage(self):
        result = calculate_commission("head_barber", 5, 1000.0, commission_percentage=70)
        assert result.percentage == 70
        assert result.commission_earned == pytest.approx(700.0)
        assert result.at_max_tier is True

    def test_head_barber_default_percentage(self):
        result = calculate_commission("head_barber", 5, 1000.0)
        assert result.percentage == 65
        assert result.commission_earned == pytest.approx(650.0)

    def test_custom_tiers_below_lowest_minimum(self):
        tiers = [CommissionTier(10, 50, None), CommissionTier(5, 40, 10)]
        resolution = resolve_commission_tier(2, tiers)
        assert resolution.percentage == 40
        assert resolution.services_needed == 8

    def test_empty_tiers(self):
        with pytest.raises(ValueError):
            resolve_commission_tier(10, [])

    def test_qualifying_totals(self, march_data):
        """Solo cuentan servicios barberia y nordico; la cantidad suma"""
        items = [item for tx in march_data["MAGALLANES"]["transactions"][:2] for item in tx["items"]]
        totals = qualifying_totals(items)
        assert totals["count"] == 3
        assert totals["revenue"] == pytest.approx(40.0)


# ===== TESTS DE REPORTES EN MEMORIA =====

class TestReportServicesInMemory:
    """Reportes calculados sobre el repositorio en memoria"""

    def test_service_requires_source(self):
        with pytest.raises(ValueError):
            BaseReportService()

    def test_cash_register_summary(self, march_data, march):
        service = FinancialReportService(repository=InMemoryPeriodDataRepository(march_data))
        summary = service.get_cash_register_summary("magallanes", march, bcv_rate=40.0)

        assert summary["total_income"] == pytest.approx(71.0)
        assert summary["total_expenses"] == pytest.approx(15.0)
        # Otros ingresos no entran en la ganancia neta
        assert summary["net_profit"] == pytest.approx(56.0)

        by_method = {entry["payment_method"]: entry for entry in summary["income_by_payment_method"]}
        assert by_method["Efectivo USD"]["amount"] == pytest.approx(40.0)
        assert by_method["Efectivo USD"]["amount_bs"] is None
        assert by_method["Pago Móvil"]["amount"] == pytest.approx(31.0)
        assert by_method["Pago Móvil"]["amount_bs"] == pytest.approx(1240.0)
        assert by_method["Pago Móvil"]["transactions_count"] == 2
        assert "Tarjeta" not in by_method

    def test_unknown_location_is_empty(self, march_data, march):
        service = FinancialReportService(repository=InMemoryPeriodDataRepository(march_data))
        summary = service.get_cash_register_summary("SARRIAS", march, bcv_rate=40.0)
        assert summary["total_income"] == 0
        assert summary["income_by_payment_method"] == []

    def test_income_by_category(self, march_data, march):
        service = FinancialReportService(repository=InMemoryPeriodDataRepository(march_data))
        report = service.get_income_by_category("MAGALLANES", march)

        categories = {entry["category"]: entry["amount"] for entry in report["categories"]}
        assert categories["Servicio de Barberia"] == pytest.approx(60.0)
        assert categories["Zona Gamer"] == pytest.approx(5.0)
        assert categories["Snacks"] == pytest.approx(6.0)
        assert categories["Venta de Activo"] == pytest.approx(100.0)
        assert "Productos" not in categories
        assert report["total"] == pytest.approx(171.0)

    def test_earnings_by_item(self, march_data, march):
        service = FinancialReportService(repository=InMemoryPeriodDataRepository(march_data))
        report = service.get_earnings_by_item("MAGALLANES", march, product_costs={"refresco": 0.5})

        items = {entry["item_id"]: entry for entry in report["items"]}
        assert items["corte"]["revenue"] == pytest.approx(40.0)
        assert items["corte"]["quantity"] == 2
        assert items["refresco"]["cost"] == pytest.approx(1.5)
        assert items["refresco"]["net"] == pytest.approx(4.5)
        assert report["items"][0]["item_id"] == "corte"
        assert report["total_net"] == pytest.approx(report["total_revenue"] - report["total_cost"])

    def test_location_distribution(self, march_data, march, even_partners_config):
        service = ProfitDistributionService(repository=InMemoryPeriodDataRepository(march_data))
        location = type("Loc", (), {"code": "MAGALLANES", "name": "Magallanes",
                                    "kind": LocationKind.STANDARD_BRANCH})()
        report = service.get_location_distribution(location, march, even_partners_config)

        assert report["distribution"]["net_profit"] == pytest.approx(56.0)
        assert report["distribution"]["local_share"] == pytest.approx(28.0)

    def test_partners_total(self, march_data, march, even_partners_config):
        """Sucursal aporta la parte de socios del pozo; planta, toda su distribución"""
        march_data["PSYFN"] = {
            "transactions": [{"total_amount": 200.0, "end_time": datetime(2024, 3, 20), "items": []}],
        }
        service = ProfitDistributionService(repository=InMemoryPeriodDataRepository(march_data))
        locations = [
            type("Loc", (), {"code": "MAGALLANES", "name": "Magallanes", "kind": LocationKind.STANDARD_BRANCH})(),
            type("Loc", (), {"code": "PSYFN", "name": "Planta", "kind": LocationKind.CENTRAL_PLANT})(),
        ]
        report = service.get_partners_total(locations, march, even_partners_config)

        # 56 * 0.5 * 0.4 * 0.6 = 6.72 ; 200 * 0.5 = 100
        assert report["total_partners_profit"] == pytest.approx(106.72)
        assert sum(p["amount"] for p in report["partners"]) == pytest.approx(106.72)
        assert report["partners"][0]["amount"] == pytest.approx(53.36)
        assert report["unallocated_amount"] == pytest.approx(0.0, abs=1e-9)

    def test_barber_report(self, march_data, march):
        barbers = [
            {"id": "b1", "name": "Luis", "role": "barber", "commission_percentage": None},
            {"id": "b2", "name": "Pedro", "role": "head_barber", "commission_percentage": 70},
        ]
        service = BarberReportService(repository=InMemoryPeriodDataRepository(march_data))
        report = service.get_barber_report("MAGALLANES", march, barbers=barbers)

        rows = {row["barber_id"]: row for row in report["barbers"]}
        assert rows["b1"]["transactions_count"] == 2
        assert rows["b1"]["total_revenue"] == pytest.approx(51.0)
        assert rows["b1"]["service_revenue"] == pytest.approx(45.0)
        assert rows["b1"]["product_revenue"] == pytest.approx(6.0)
        assert rows["b1"]["qualifying_services"] == 3
        # Dos semanas distintas, ambas en el nivel de 55%
        assert rows["b1"]["commission_earned"] == pytest.approx(40.0 * 0.55)
        assert rows["b2"]["commission_earned"] == pytest.approx(20.0 * 0.70)
        assert report["barbers"][0]["barber_id"] == "b1"

    def test_weekly_commissions(self, march_data):
        barbers = [{"id": "b2", "name": "Pedro", "role": "barber", "commission_percentage": None}]
        service = BarberReportService(repository=InMemoryPeriodDataRepository(march_data))
        report = service.get_weekly_commissions("MAGALLANES", datetime(2024, 3, 17, 20, 0), barbers=barbers)

        assert report["week_start"] == datetime(2024, 3, 11)
        row = report["barbers"][0]
        assert row["service_count"] == 1
        assert row["percentage"] == 55
        assert row["services_needed"] == 29
        assert row["commission_earned"] == pytest.approx(11.0)


# ===== TESTS DE ENDPOINTS =====

def _create_sale(client, location_code="MAGALLANES", role="barber", payment_method="Efectivo USD"):
    params = {"location": location_code}
    barber = client.post("/api/v1/staff/", params=params, json={"name": "Luis", "role": role}).json()
    service = client.post(
        "/api/v1/catalog/services", params=params,
        json={"name": "Corte", "price": 1000.0, "category": "barberia"}
    ).json()
    ticket = client.post(
        "/api/v1/sales/tickets", params=params,
        json={"customer_name": "Carlos", "barber_id": barber["id"],
              "items": [{"item_id": service["id"], "type": "service"}]}
    ).json()
    paid = client.post(
        f"/api/v1/sales/tickets/{ticket['id']}/pay", params=params,
        json={"payment_method": payment_method}
    )
    assert paid.status_code == 200
    return barber, paid.json()


class TestReportEndpoints:
    """Tests de integración de los endpoints de reportes"""

    def test_cash_register_summary(self, client, locations):
        _create_sale(client, payment_method="Pago Móvil")
        client.post("/api/v1/expenses/", params={"location": "MAGALLANES"},
                    json={"description": "Toallas", "amount": 100.0, "category": "Suministros"})

        response = client.get("/api/v1/reports/financial/cash-register",
                              params={"location": "MAGALLANES", "preset": "today"})
        assert response.status_code == 200
        data = response.json()
        assert data["total_income"] == pytest.approx(1000.0)
        assert data["total_expenses"] == pytest.approx(100.0)
        assert data["net_profit"] == pytest.approx(900.0)
        assert data["income_by_payment_method"][0]["amount_bs"] == pytest.approx(1000.0 * 36.5)
        assert len(data["transactions"]) == 1

    def test_cash_register_csv(self, client, locations):
        _create_sale(client)
        response = client.get("/api/v1/reports/financial/cash-register",
                              params={"location": "MAGALLANES", "preset": "today", "export": "csv"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")

    def test_unknown_location(self, client, locations):
        response = client.get("/api/v1/reports/financial/cash-register", params={"location": "NOPE"})
        assert response.status_code == 404

    def test_invalid_period(self, client, locations):
        response = client.get("/api/v1/reports/financial/cash-register",
                              params={"location": "MAGALLANES", "start_date": "2024-03-02",
                                      "end_date": "2024-03-01"})
        assert response.status_code == 422

    def test_location_distribution(self, client, locations):
        _create_sale(client)
        response = client.get("/api/v1/reports/distribution/MAGALLANES", params={"preset": "today"})
        assert response.status_code == 200
        tree = response.json()["distribution"]
        assert tree["net_profit"] == pytest.approx(1000.0)
        assert tree["franchisee_share"] == pytest.approx(300.0)
        assert tree["plant_share"] == pytest.approx(80.0)
        assert tree["unallocated_amount"] == pytest.approx(0.12)

    def test_location_distribution_not_found(self, client, locations):
        response = client.get("/api/v1/reports/distribution/NOPE")
        assert response.status_code == 404

    def test_unsupported_kind_is_422(self, client, locations, monkeypatch):
        from app.modules.reports.routers import distribution as distribution_router

        def raise_unsupported(self, location, date_range, config=None):
            raise UnsupportedLocationKindError("kiosk")

        monkeypatch.setattr(distribution_router.ProfitDistributionService,
                            "get_location_distribution", raise_unsupported)
        response = client.get("/api/v1/reports/distribution/MAGALLANES")
        assert response.status_code == 422

    def test_partners_total(self, client, locations):
        _create_sale(client)
        response = client.get("/api/v1/reports/distribution/total")
        assert response.status_code == 200
        data = response.json()
        assert data["period_start"] == date(date.today().year, 1, 1).isoformat()
        assert data["total_partners_profit"] == pytest.approx(120.0)
        assert len(data["locations"]) == 3

    def test_barber_report_and_weekly_commissions(self, client, locations):
        barber, _ = _create_sale(client)
        report = client.get("/api/v1/reports/barbers", params={"location": "MAGALLANES", "preset": "today"})
        assert report.status_code == 200
        row = report.json()["barbers"][0]
        assert row["barber_id"] == barber["id"]
        assert row["commission_earned"] == pytest.approx(550.0)

        weekly = client.get("/api/v1/reports/commissions/weekly", params={"location": "MAGALLANES"})
        assert weekly.status_code == 200
        assert weekly.json()["barbers"][0]["services_needed"] == 29

    def test_dashboard(self, client, locations):
        _create_sale(client)
        response = client.get("/api/v1/reports/dashboard", params={"location": "MAGALLANES"})
        assert response.status_code == 200
        data = response.json()
        assert data["sales_today"] == pytest.approx(1000.0)
        assert data["transactions_today"] == 1
        assert data["staff_count"] == 1
