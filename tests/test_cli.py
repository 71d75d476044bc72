"""
Tests for the genorm command line.
"""
from genorm.cli import main


class TestCli:
    """Tests for genorm.cli.main()."""
    
    def test_missing_argument(self, capsys):
        assert main([]) == 1
        assert "Usage: genorm CONFIG-JSON" in capsys.readouterr().err
    
    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.json")]) == 1
        assert "Unable to open" in capsys.readouterr().err
    
    def test_malformed_document(self, write_config, capsys):
        assert main([str(write_config("{"))]) == 1
        assert "Error while loading config" in capsys.readouterr().err
    
    def test_success(self, config_document, write_config, tmp_path, monkeypatch, capsys):
        """Artifacts land in output-dir relative to the working directory."""
        path = write_config(config_document)
        monkeypatch.chdir(tmp_path)
        
        assert main([str(path)]) == 0
        
        assert (tmp_path / "out" / "TestProj.orm.h").exists()
        assert (tmp_path / "out" / "TestProj.orm.cc").exists()
        out = capsys.readouterr().out
        assert out.count("Generated: ") == 2
    
    def test_version_mismatch_is_warning(self, config_document, write_config, tmp_path, monkeypatch, capsys):
        config_document["genORM-config-version"] = 7
        path = write_config(config_document)
        monkeypatch.chdir(tmp_path)
        
        assert main([str(path)]) == 0
        assert "Unsupported config version" in capsys.readouterr().err
    
    def test_schema_error(self, config_document, write_config, tmp_path, monkeypatch, capsys):
        config_document["object-types"][0]["members"] = []
        path = write_config(config_document)
        monkeypatch.chdir(tmp_path)
        
        assert main([str(path)]) == 1
        assert "Object type has no members: Point" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()
    
    def test_unknown_root(self, config_document, write_config, tmp_path, monkeypatch, capsys):
        config_document["cxx-options"]["output-dir-root"] = "SOMEWHERE"
        path = write_config(config_document)
        monkeypatch.chdir(tmp_path)
        
        assert main([str(path)]) == 1
        assert "Unknown root: SOMEWHERE" in capsys.readouterr().err
    
    def test_verbose(self, config_document, write_config, tmp_path, monkeypatch, capsys):
        path = write_config(config_document)
        monkeypatch.chdir(tmp_path)
        
        assert main([str(path), "-v"]) == 0
        out = capsys.readouterr().out
        assert "Object types: Point" in out
    
    def test_extra_arguments_ignored(self, config_document, write_config, tmp_path, monkeypatch, capsys):
        """Anything after the config path does not change the exit status."""
        path = write_config(config_document)
        monkeypatch.chdir(tmp_path)
        
        assert main([str(path), "extra", "--unknown-flag"]) == 0
        assert (tmp_path / "out" / "TestProj.orm.h").exists()
        assert capsys.readouterr().out.count("Generated: ") == 2
