from readiness import load_catalog


class TestLoadCatalog:
    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "skills:\n"
            "  - {id: js, name: JavaScript, category: Programming Languages}\n"
            "  - {id: css, name: CSS3}\n"
            "roles:\n"
            "  - id: frontend-dev\n"
            "    title: Frontend Developer\n"
            "    required_skills:\n"
            "      - {skill_id: js, min_proficiency: intermediate}\n"
            "resources:\n"
            "  js:\n"
            "    - {id: js-1, title: JavaScript.info, duration: 20 hours}\n"
        )

        catalog = load_catalog(path)

        assert catalog.skill_index()["css"].category == ""
        assert catalog.get_role("frontend-dev").required_skills[0].min_proficiency.value == "intermediate"
        assert catalog.get_role("missing") is None
        assert catalog.resources["js"][0].duration == "20 hours"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        catalog = load_catalog(path)

        assert catalog.skills == [] and catalog.roles == [] and catalog.resources == {}
