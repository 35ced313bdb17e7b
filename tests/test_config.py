import pytest

from jetreco.jrutils import read_config, config_path, ConfigurationError


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        read_config(str(tmp_path / 'nope.yaml'))

def test_bad_yaml(tmp_path):
    f = tmp_path / 'bad.yaml'
    f.write_text('jet_R: [1.0\n')
    with pytest.raises(ConfigurationError):
        read_config(str(f))

def test_not_a_mapping(tmp_path):
    f = tmp_path / 'list.yaml'
    f.write_text('- 1\n- 2\n')
    with pytest.raises(ConfigurationError, match="mapping"):
        read_config(str(f))

def test_empty_file_is_empty_config(tmp_path):
    f = tmp_path / 'empty.yaml'
    f.write_text('# nothing\n')
    assert read_config(str(f)) == {}

def test_shipped_exp_config():
    c = read_config(config_path('exp.yaml'))
    assert c['event_number_max'] is None
    assert c['progress_interval'] == 10000
    assert c['debug_level'] == 0

def test_shipped_groom_config():
    c = read_config(config_path('groom.yaml'))
    assert c['jet_R'] == 1.0
    assert c['trimming'] == {'subjet_R': 0.2, 'fcut': 0.05}
    assert c['pruning'] == {'zcut': 0.1, 'rcut_factor': 0.5}
    for key in ['soft_drop', 'recursive_soft_drop', 'bottom_up_soft_drop', 'bottom_up_soft_drop_tight']:
        assert set(c[key]) >= {'beta', 'zcut'}
    assert c['bottom_up_soft_drop_tight']['zcut'] > c['bottom_up_soft_drop']['zcut']
    assert isinstance(c['substructure']['pt_min'], float)
    assert c['substructure']['pt_min'] == 400.e3
