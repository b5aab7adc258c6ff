"""
Unit tests for src/channels/commands/subject.py
"""

# Import fixtures
pytest_plugins = ["tests.fixtures.commands"]


class TestCreate:
    """Tests for !materia crear."""

    def test_create_subject(self, run, subjects):
        response = run('!materia crear mat101 "Matemáticas" "Álgebra básica" "Dr. Juan Pérez"')

        assert response.startswith("✅")
        assert "MAT101 - Matemáticas" in response
        assert "Álgebra básica" in response
        assert "Dr. Juan Pérez" in response

        subject = subjects.find_by_code("MAT101")
        assert subject.name == "Matemáticas"
        assert subject.creator_id == "user-1234567"

    def test_create_requires_name(self, run):
        response = run("!materia crear MAT101")

        assert response.startswith("❌")
        assert "materia crear CODIGO" in response

    def test_create_empty_name(self, run):
        response = run('!materia crear MAT101 ""')

        assert "Código y nombre son obligatorios" in response

    def test_create_duplicate_code(self, run):
        run('!materia crear MAT101 "Matemáticas"')
        response = run('!materia crear mat101 "Otra"')

        assert response.startswith("❌")
        assert "MAT101" in response


class TestList:
    """Tests for !materia listar."""

    def test_list_empty(self, run):
        assert "No hay materias" in run("!materia listar")

    def test_list_all(self, run):
        run('!materia crear MAT101 "Matemáticas"')
        run('!materia crear HIS201 "Historia"')

        response = run("!materia listar")

        assert "1. **MAT101 - Matemáticas**" in response
        assert "2. **HIS201 - Historia**" in response

    def test_list_archived_filter_without_matches(self, run):
        run('!materia crear MAT101 "Matemáticas"')

        response = run("!materia listar archivadas")

        assert response.startswith("❌")
        assert "archivadas" in response

    def test_list_detail(self, run):
        run('!materia crear MAT101 "Matemáticas" "Álgebra" "Dra. Ana"')

        response = run("!materia listar detalle")

        assert "Álgebra" in response
        assert "Dra. Ana" in response


class TestDelete:
    """Tests for !materia eliminar."""

    def test_delete_by_creator(self, run, subjects):
        run('!materia crear MAT101 "Matemáticas"')

        response = run("!materia eliminar mat101")

        assert response.startswith("✅")
        assert subjects.find_by_code("MAT101") is None

    def test_delete_by_other_user(self, run, subjects):
        run('!materia crear MAT101 "Matemáticas"')

        response = run("!materia eliminar MAT101", caller_id="someone-else")

        assert "Solo el creador" in response
        assert subjects.find_by_code("MAT101") is not None

    def test_delete_with_tasks(self, run):
        run('!materia crear MAT101 "Matemáticas"')
        run('!tarea crear "Estudiar" "" mat101')

        response = run("!materia eliminar MAT101")

        assert "tiene 1 tareas" in response

    def test_delete_unknown(self, run):
        assert "XYZ" in run("!materia eliminar xyz")


class TestSubjectTasks:
    """Tests for !materia tareas."""

    def test_tasks_of_subject(self, run):
        run('!materia crear MAT101 "Matemáticas"')
        run('!tarea crear "Otra cosa"')
        run('!tarea crear "Estudiar capítulo 5" "Revisar" MAT101')

        response = run("!materia tareas mat101")

        assert "Tareas de MAT101 - Matemáticas" in response
        assert "2. ⏳ **Estudiar capítulo 5**" in response
        assert "Otra cosa" not in response

    def test_tasks_of_unknown_subject(self, run):
        assert run("!materia tareas NOPE").startswith("❌")


class TestActions:
    """Tests for action resolution."""

    def test_missing_action(self, run):
        response = run("!materia")

        assert "Debes especificar una acción" in response
        assert "!ayuda materia" in response

    def test_unknown_action(self, run):
        response = run("!materia volar")

        assert "volar" in response
        assert "`crear`" in response

    def test_action_is_case_insensitive(self, run):
        assert "No hay materias" in run("!materia LISTAR")
