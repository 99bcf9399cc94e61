"""
Tests del panel /admin: control de acceso, CRUD, reordenación y subidas.
"""
import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.models import UserRole
from app.services.content import ProjectRepository
from tests.conftest import EDITOR_ID, make_token

PROJECT = {
    "title_es": "Portafolio",
    "title_en": "Portfolio",
    "description_es": "Mi sitio",
    "description_en": "My site",
    "tech": ["Python", "FastAPI"],
}


def create_project(client, title, **extra):
    data = {**PROJECT, "title_es": f"{title} ES", "title_en": f"{title} EN", **extra}
    response = client.post("/admin/projects/", json=data)
    assert response.status_code == 201, response.text
    return response.json()


class TestAccessControl:
    def test_anonymous_is_redirected_to_login(self, client):
        response = client.get("/admin/projects/", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/login"

    def test_invalid_token_is_redirected_to_login(self, client, roles):
        client.headers.update({"Authorization": "Bearer no-es-un-jwt"})
        response = client.get("/admin/", follow_redirects=False)
        assert response.status_code == 303

    def test_token_signed_with_other_secret(self, client, roles):
        token = make_token(EDITOR_ID, secret="otro-secreto")
        client.cookies.set("access_token", token)
        response = client.get("/admin/hero/", follow_redirects=False)
        assert response.status_code == 303

    def test_expired_token(self, client, roles):
        client.cookies.set("access_token", make_token(EDITOR_ID, expires_in=-60))
        assert client.get("/admin/", follow_redirects=False).status_code == 303

    def test_wrong_role_gets_inline_denial(self, client, roles):
        client.cookies.set("access_token", make_token(EDITOR_ID))
        response = client.get("/admin/projects/", follow_redirects=False)
        assert response.status_code == 403
        assert "No estás autorizado." in response.text

    def test_user_without_role_row(self, client, roles):
        client.cookies.set("access_token", make_token("5b0c3f9e-1111-4a6b-9a43-3e9d6a8b7c21"))
        assert client.get("/admin/", follow_redirects=False).status_code == 403

    def test_admin_dashboard(self, admin_client):
        response = admin_client.get("/admin/")
        assert response.status_code == 200
        assert "Proyectos" in response.text

    def test_public_site_is_open(self, client):
        assert client.get("/").status_code == 200


class TestProjectsCrud:
    def test_create_without_order_appends(self, admin_client):
        create_project(admin_client, "P1")
        create_project(admin_client, "P2")
        third = create_project(admin_client, "P3")
        assert third["order"] == 30

    def test_list_update_delete(self, admin_client):
        first = create_project(admin_client, "P1")
        second = create_project(admin_client, "P2")

        response = admin_client.put(f"/admin/projects/{first['id']}", json={"live_url": "https://demo.example.com"})
        assert response.status_code == 200
        assert response.json()["live_url"] == "https://demo.example.com"
        assert response.json()["title_es"] == "P1 ES"

        response = admin_client.delete(f"/admin/projects/{second['id']}")
        assert response.json() == {"message": "Proyecto borrado exitosamente"}

        listed = admin_client.get("/admin/projects/").json()
        assert [p["id"] for p in listed] == [first["id"]]

    def test_missing_required_field(self, admin_client):
        response = admin_client.post("/admin/projects/", json={"title_es": "Solo ES"})
        assert response.status_code == 422

    def test_not_found(self, admin_client):
        response = admin_client.delete("/admin/projects/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404
        assert response.json()["detail"] == "Proyecto no encontrado"


class TestReorderEndpoint:
    def test_move_third_project_up(self, admin_client):
        p1 = create_project(admin_client, "P1", order=10)
        p2 = create_project(admin_client, "P2", order=20)
        p3 = create_project(admin_client, "P3", order=30)

        response = admin_client.post("/admin/projects/reorder", json={"index": 2, "direction": "up"})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Orden actualizado"
        assert [(p["id"], p["order"]) for p in body["items"]] == [
            (p1["id"], 10), (p3["id"], 20), (p2["id"], 30),
        ]

        listed = admin_client.get("/admin/projects/").json()
        assert [p["id"] for p in listed] == [p1["id"], p3["id"], p2["id"]]

    def test_boundary_move_is_a_no_op(self, admin_client):
        p1 = create_project(admin_client, "P1")
        response = admin_client.post(f"/admin/projects/{p1['id']}/move", json={"direction": "up"})
        assert response.status_code == 200
        assert response.json()["message"] == "Sin cambios"
        assert response.json()["items"][0]["order"] == 10

    def test_invalid_direction(self, admin_client):
        response = admin_client.post("/admin/projects/reorder", json={"index": 0, "direction": "left"})
        assert response.status_code == 422

    def test_experience_and_technologies_reorder(self, admin_client):
        for name in ("A", "B"):
            admin_client.post("/admin/technologies/", json={"name": name, "category": "dominant"})
        body = admin_client.post("/admin/technologies/reorder", json={"index": 0, "direction": "down"}).json()
        assert [t["name"] for t in body["items"]] == ["B", "A"]

        for company in ("X", "Y"):
            admin_client.post("/admin/experience/", json={
                "position_es": "Dev", "position_en": "Dev", "company": company,
                "period_es": "2024", "period_en": "2024",
                "description_items_es": ["uno", "dos"], "description_items_en": ["one", "two"],
            })
        body = admin_client.post("/admin/experience/reorder", json={"index": 1, "direction": "up"}).json()
        assert [e["company"] for e in body["items"]] == ["Y", "X"]
        assert body["items"][1]["description_items_en"] == ["one", "two"]


class TestOtherSections:
    def test_general_text_key_cannot_change(self, admin_client):
        created = admin_client.post("/admin/general-text/", json={
            "key": "nav_projects", "text_es": "Proyectos", "text_en": "Projects",
        }).json()
        response = admin_client.put(f"/admin/general-text/{created['id']}", json={"key": "otra"})
        assert response.status_code == 400

    def test_general_text_duplicate_key_surfaces_store_message(self, admin_client):
        payload = {"key": "nav_exp", "text_es": "Experiencia", "text_en": "Experience"}
        admin_client.post("/admin/general-text/", json=payload)
        response = admin_client.post("/admin/general-text/", json=payload)
        assert response.status_code == 500
        assert response.json()["detail"] == "Error al guardar"
        assert response.json()["description"]

    def test_social_link_icon_validation(self, admin_client):
        ok = admin_client.post("/admin/social-links/", json={
            "name": "GitHub", "url": "https://github.com/yo", "icon_key": "GitHub",
        })
        assert ok.status_code == 201
        assert ok.json()["icon_key"] == "github"

        bad = admin_client.post("/admin/social-links/", json={
            "name": "Mastodon", "url": "https://mastodon.social/@yo", "icon_key": "mastodon",
        })
        assert bad.status_code == 422

    def test_icon_options(self, admin_client):
        icons = admin_client.get("/admin/social-links/icons").json()
        assert icons["github"] == "GitHub"
        assert "link" in icons

    def test_technology_category_validation(self, admin_client):
        response = admin_client.post("/admin/technologies/", json={"name": "Rust", "category": "expert"})
        assert response.status_code == 422

    def test_hero_current(self, admin_client):
        assert admin_client.get("/admin/hero/current").status_code == 404
        admin_client.post("/admin/hero/", json={
            "greeting_es": "Hola", "greeting_en": "Hi", "title": "Dev",
            "subtitle_es": "Sub ES", "subtitle_en": "Sub EN",
        })
        assert admin_client.get("/admin/hero/current").json()["title"] == "Dev"


class TestUploads:
    def test_upload_without_file(self, admin_client, supabase_client):
        response = admin_client.post("/admin/uploads/projects")
        assert response.status_code == 400
        assert response.json()["detail"] == "Por favor, selecciona un archivo primero."
        assert supabase_client.calls == []

    def test_upload_returns_url(self, admin_client):
        response = admin_client.post(
            "/admin/uploads/cvs",
            files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
        )
        assert response.status_code == 200
        assert response.json()["url"].endswith(".pdf")

    def test_unknown_bucket(self, admin_client):
        response = admin_client.post("/admin/uploads/privado", files={"file": ("a.png", b"x", "image/png")})
        assert response.status_code == 404

    def test_project_image_replaces_and_gallery_appends(self, admin_client):
        project = create_project(admin_client, "P1", image_url="https://old/img.png", gallery_urls=["https://old/g1.png"])

        image = admin_client.post(
            f"/admin/projects/{project['id']}/image",
            files={"file": ("nueva.jpg", b"jpg", "image/jpeg")},
        ).json()
        assert image["image_url"].endswith(".jpg")
        assert image["gallery_urls"] == ["https://old/g1.png"]

        gallery = admin_client.post(
            f"/admin/projects/{project['id']}/gallery",
            files={"file": ("g2.png", b"png", "image/png")},
        ).json()
        assert gallery["image_url"] == image["image_url"]
        assert len(gallery["gallery_urls"]) == 2
        assert gallery["gallery_urls"][0] == "https://old/g1.png"
        assert gallery["gallery_urls"][1].endswith(".png")

    def test_failed_upload_leaves_row_untouched(self, admin_client, supabase_client):
        project = create_project(admin_client, "P1", image_url="https://old/img.png")
        supabase_client.fail_with = RuntimeError("The resource already exists")

        response = admin_client.post(
            f"/admin/projects/{project['id']}/image",
            files={"file": ("nueva.jpg", b"jpg", "image/jpeg")},
        )
        assert response.status_code == 502
        assert response.json()["description"] == "The resource already exists"
        assert admin_client.get(f"/admin/projects/{project['id']}").json()["image_url"] == "https://old/img.png"

    def test_hero_cv_and_technology_logo(self, admin_client):
        hero = admin_client.post("/admin/hero/", json={
            "greeting_es": "Hola", "greeting_en": "Hi", "title": "Dev",
            "subtitle_es": "Sub", "subtitle_en": "Sub",
        }).json()
        cv = admin_client.post(f"/admin/hero/{hero['id']}/cv", files={"file": ("cv.pdf", b"pdf", "application/pdf")})
        assert cv.json()["cv_url"].endswith(".pdf")

        tech = admin_client.post("/admin/technologies/", json={"name": "Python"}).json()
        logo = admin_client.post(
            f"/admin/technologies/{tech['id']}/logo",
            files={"file": ("python.svg", b"<svg/>", "image/svg+xml")},
        )
        assert "/technologies/" in logo.json()["logo_url"]

    @pytest.mark.parametrize("path", ["/admin/uploads/projects"])
    def test_uploads_require_admin(self, client, path):
        response = client.post(path, files={"file": ("a.png", b"x", "image/png")}, follow_redirects=False)
        assert response.status_code == 303


class TestRoleCheck:
    @pytest.mark.parametrize("role", ["Admin", " admin ", "ADMIN"])
    def test_role_must_match_exactly(self, client, db, role):
        user_id = "9a1d2c3e-4f50-4a6b-8c7d-0e1f2a3b4c5d"
        db.add(UserRole(id=user_id, role=role))
        db.commit()
        client.cookies.set("access_token", make_token(user_id))

        response = client.get("/admin/", follow_redirects=False)
        assert response.status_code == 403
        assert "No estás autorizado." in response.text


class TestNullUpdates:
    @pytest.mark.parametrize("payload", [
        {"title_es": None},
        {"description_en": None},
        {"gallery_urls": None},
        {"tech": None},
    ])
    def test_project_not_null_fields(self, admin_client, payload):
        project = create_project(admin_client, "P1")
        response = admin_client.put(f"/admin/projects/{project['id']}", json=payload)
        assert response.status_code == 422
        stored = admin_client.get(f"/admin/projects/{project['id']}").json()
        assert stored["title_es"] == "P1 ES"
        assert stored["gallery_urls"] == []

    def test_hero_title(self, admin_client):
        hero = admin_client.post("/admin/hero/", json={
            "greeting_es": "Hola", "greeting_en": "Hi", "title": "Dev",
            "subtitle_es": "Sub", "subtitle_en": "Sub",
        }).json()
        assert admin_client.put(f"/admin/hero/{hero['id']}", json={"title": None}).status_code == 422
        assert admin_client.put(f"/admin/hero/{hero['id']}", json={"cv_url": None}).status_code == 200

    def test_other_sections(self, admin_client):
        text = admin_client.post("/admin/general-text/", json={
            "key": "nav_tech", "text_es": "Tecnologías", "text_en": "Technologies",
        }).json()
        assert admin_client.put(f"/admin/general-text/{text['id']}", json={"text_en": None}).status_code == 422

        tech = admin_client.post("/admin/technologies/", json={"name": "Go"}).json()
        assert admin_client.put(f"/admin/technologies/{tech['id']}", json={"category": None}).status_code == 422
        assert admin_client.put(f"/admin/technologies/{tech['id']}", json={"logo_url": None}).status_code == 200

        link = admin_client.post("/admin/social-links/", json={"name": "Web", "url": "https://yo.dev"}).json()
        assert admin_client.put(f"/admin/social-links/{link['id']}", json={"url": None}).status_code == 422

        exp = admin_client.post("/admin/experience/", json={
            "position_es": "Dev", "position_en": "Dev", "company": "X",
            "period_es": "2024", "period_en": "2024",
        }).json()
        assert admin_client.put(f"/admin/experience/{exp['id']}", json={"technologies": None}).status_code == 422


class TestReorderFailure:
    def test_error_carries_the_stored_order(self, admin_client, monkeypatch):
        p1 = create_project(admin_client, "P1")
        p2 = create_project(admin_client, "P2")

        def broken(*args, **kwargs):
            raise OperationalError("UPDATE projects", {}, Exception("conexión perdida"))

        monkeypatch.setattr(Session, "bulk_update_mappings", broken)
        response = admin_client.post("/admin/projects/reorder", json={"index": 1, "direction": "up"})

        assert response.status_code == 500
        body = response.json()
        assert body["detail"] == "Error al reordenar"
        assert [(p["id"], p["order"]) for p in body["items"]] == [(p1["id"], 10), (p2["id"], 20)]


class TestPanelForms:
    def test_read_failure_shows_notice_and_empty_list(self, admin_client, monkeypatch):
        create_project(admin_client, "P1")

        def broken(self):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(ProjectRepository, "_order_by", broken)
        response = admin_client.get("/admin/?section=projects")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Error al cargar proyectos" in response.text
        assert "connection lost" in response.text
        assert "Sin elementos" in response.text

    def test_create_edit_move_delete(self, admin_client):
        response = admin_client.post("/admin/forms/projects", data={
            "title_es": "Primero", "title_en": "First", "tech": "Python\nFastAPI\n",
        }, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/admin/?section=projects&done=saved"
        admin_client.post("/admin/forms/projects", data={"title_es": "Segundo", "title_en": "Second"})

        first, second = admin_client.get("/admin/projects/").json()
        assert first["tech"] == ["Python", "FastAPI"]
        assert second["order"] == 20

        page = admin_client.get(f"/admin/?section=projects&edit={first['id']}").text
        assert 'value="Primero"' in page

        admin_client.post(f"/admin/forms/projects/{first['id']}", data={"title_en": "Renamed", "tech": "Go"})
        updated = admin_client.get(f"/admin/projects/{first['id']}").json()
        assert updated["title_en"] == "Renamed"
        assert updated["title_es"] == "Primero"
        assert updated["tech"] == ["Go"]

        response = admin_client.post(f"/admin/forms/projects/{second['id']}/move/up", follow_redirects=False)
        assert response.headers["location"].endswith("done=reordered")
        assert [p["id"] for p in admin_client.get("/admin/projects/").json()] == [second["id"], first["id"]]

        response = admin_client.post(f"/admin/forms/projects/{second['id']}/move/up", follow_redirects=False)
        assert response.headers["location"].endswith("done=unchanged")

        page = admin_client.post(f"/admin/forms/projects/{first['id']}/delete").text
        assert "Proyecto borrado exitosamente" in page
        assert [p["id"] for p in admin_client.get("/admin/projects/").json()] == [second["id"]]

    def test_missing_required_field_renders_notice(self, admin_client):
        response = admin_client.post("/admin/forms/projects", data={"title_es": "Solo ES"})
        assert response.status_code == 400
        assert "Revisa el formulario" in response.text
        assert "title_en" in response.text
        assert admin_client.get("/admin/projects/").json() == []

    def test_general_text_key_stays_fixed(self, admin_client):
        admin_client.post("/admin/forms/general-text", data={"key": "nav_exp", "text_es": "Exp", "text_en": "Exp"})
        text = admin_client.get("/admin/general-text/").json()[0]

        response = admin_client.post(f"/admin/forms/general-text/{text['id']}", data={"key": "otra", "text_es": "x"})
        assert response.status_code == 400
        assert admin_client.get(f"/admin/general-text/{text['id']}").json()["key"] == "nav_exp"

    def test_hero_has_no_move(self, admin_client):
        admin_client.post("/admin/forms/hero", data={
            "greeting_es": "Hola", "greeting_en": "Hi", "title": "Dev",
            "subtitle_es": "Sub", "subtitle_en": "Sub",
        })
        hero = admin_client.get("/admin/hero/current").json()
        assert admin_client.post(f"/admin/forms/hero/{hero['id']}/move/up").status_code == 404

    def test_forms_require_admin(self, client):
        response = client.post("/admin/forms/projects", data={"title_es": "a", "title_en": "b"}, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/login"
