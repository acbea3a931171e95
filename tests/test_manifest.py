import pandas as pd
import pytest

from app import App
from config import AppConfig, ManifestConfig
from conftest import eot, off, on
from manifest.composers import ComposerNotFoundError, get_composer
from manifest.listing import enrich_manifest, midi_file_list, performer_of, to_name_case
from utils.path import csv_path_for


def test_to_name_case():
    assert to_name_case("Test") == "Test"
    assert to_name_case("FirstL") == "FirstL"
    assert to_name_case("ALLCAPS") == "Allcaps"


def test_performer_from_performance_file():
    assert performer_of("Bach/Fugue/bwv_846/Shi05M.mid") == "Shi"
    assert performer_of("Chopin/Etudes_op_10/1/KABUKI06.mid") == "Kabuki"
    with pytest.raises(ValueError):
        performer_of("Bach/Fugue/123.mid")


def test_composer_lookup_is_case_insensitive():
    c = get_composer("bEeThOvEn")
    assert (c.name, c.year_born, c.year_died) == ("Beethoven", 1770, 1827)
    with pytest.raises(ComposerNotFoundError):
        get_composer("Salieri")


def test_csv_path_for():
    assert csv_path_for("a/b/x.mid") == "a/b/x.csv"
    assert csv_path_for("x.MIDI") == "x.csv"


@pytest.fixture
def manifest_df():
    return pd.DataFrame({
        "composer": ["Bach", "Bach", "Chopin"],
        "title": ["Fugue 1", "Fugue 1", "Etude"],
        "midi_score": ["Bach/f1/score.mid", "Bach/f1/score.mid", "Chopin/e/score.mid"],
        "midi_performance": ["Bach/f1/Shi05M.mid", "Bach/f1/LEE01.mid", "Chopin/e/Kim03.mid"],
    })


def test_midi_file_list_shares_scores(manifest_df):
    assert midi_file_list(manifest_df) == [
        "Bach/f1/Shi05M.mid", "Bach/f1/score.mid", "Bach/f1/LEE01.mid",
        "Chopin/e/Kim03.mid", "Chopin/e/score.mid",
    ]


def test_enrich_manifest_columns(manifest_df):
    df = enrich_manifest(manifest_df)
    assert list(df.columns) == [
        "composer", "year_born", "year_died", "title", "midi_score", "performer",
        "midi_performance", "csv_score", "csv_performance",
    ]
    assert df["performer"].tolist() == ["Shi", "Lee", "Kim"]
    assert df["year_born"].tolist() == [1685, 1685, 1810]
    assert df["csv_performance"].tolist()[0] == "Bach/f1/Shi05M.csv"
    again = enrich_manifest(df)
    assert list(again.columns) == list(df.columns)


def test_enrich_manifest_unknown_composer(manifest_df):
    manifest_df.loc[2, "composer"] = "Nobody"
    with pytest.raises(ComposerNotFoundError):
        enrich_manifest(manifest_df)


class TestRunManifest:
    @pytest.fixture
    def dataset(self, tmp_path, write_midi, manifest_df):
        for rel in set(midi_file_list(manifest_df)):
            write_midi([[on(60), off(60, time=240), eot()]], name=rel)
        path = tmp_path / "metadata.csv"
        manifest_df.to_csv(path, index=False)
        return tmp_path, path

    def test_converts_every_file_and_updates_manifest(self, dataset):
        root, path = dataset
        written = App().run_manifest(str(path))
        assert len(written) == 5
        for rel in ["Bach/f1/Shi05M.csv", "Bach/f1/score.csv", "Chopin/e/score.csv"]:
            assert (root / rel).exists()
        updated = pd.read_csv(path)
        assert "performer" in updated.columns
        assert updated["year_died"].tolist() == [1750, 1750, 1849]

    def test_explicit_root(self, dataset, tmp_path):
        root, path = dataset
        moved = tmp_path / "elsewhere" / "metadata.csv"
        moved.parent.mkdir()
        moved.write_text(path.read_text())
        App(AppConfig(manifest=ManifestConfig(root=str(root)))).run_manifest(str(moved))
        assert (root / "Chopin/e/Kim03.csv").exists()

    def test_first_failure_stops_the_batch(self, dataset):
        root, path = dataset
        (root / "Bach/f1/LEE01.mid").unlink()
        before = path.read_text()
        with pytest.raises(OSError):
            App().run_manifest(str(path))
        assert (root / "Bach/f1/score.csv").exists()
        assert not (root / "Chopin/e/Kim03.csv").exists()
        assert path.read_text() == before
