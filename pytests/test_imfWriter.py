#test_imfWriter
import datetime
import os
import numpy as np
import pytest

import ulfpy.udefs as ud
import ulfpy.ulfTools as ult
from ulfpy.solarWind import imfWriter, swState
from ulfpy.ulfErrors import ULFFormatError, ULFWriteError

@pytest.fixture
def exampleRec():
    return "2000 01 01 06 00 00 000     0.0     0.0     5.0  -400.0     0.0     0.0   5.000   116173.91"

def test_fmtRecord(exampleRec):
    line = imfWriter.fmtRecord((2000,1,1,6,0,0,0),0.0,0.0,5.0,-400.0,0.0,0.0,5.0,ud.Tref)
    assert line == exampleRec
    assert len(line) == imfWriter.RECLEN == 91

def test_fmtRecord_rounding():
    line = imfWriter.fmtRecord((2013,12,31,23,59,59,0),-1.26,0.04,12.35,-612.349,3.0,-0.05,4.2236,123456.789)
    assert line == "2013 12 31 23 59 59 000    -1.3     0.0    12.3  -612.3     3.0    -0.1   4.224   123456.79"

def test_parseRecord(exampleRec):
    rec = imfWriter.parseRecord(exampleRec)
    assert (rec['year'],rec['month'],rec['day']) == (2000,1,1)
    assert (rec['hour'],rec['minute'],rec['second'],rec['ms']) == (6,0,0,0)
    assert (rec['bx'],rec['by'],rec['bz']) == (0.0,0.0,5.0)
    assert (rec['vx'],rec['vy'],rec['vz']) == (-400.0,0.0,0.0)
    assert rec['n'] == 5.0
    assert rec['T'] == pytest.approx(ud.Tref,abs=0.005)

def test_roundTrip():
    vals = dict(bx=-3.44,by=1.06,bz=7.91,vx=-512.66,vy=12.04,vz=-9.95,n=6.1234,T=98765.4321)
    cal = (2001,7,4,13,5,9,0)
    rec = imfWriter.parseRecord(imfWriter.fmtRecord(cal,**vals))
    for key in ['bx','by','bz','vx','vy','vz']:
        assert rec[key] == pytest.approx(vals[key],abs=0.05)
    assert rec['n'] == pytest.approx(vals['n'],abs=0.0005)
    assert rec['T'] == pytest.approx(vals['T'],abs=0.005)
    assert [rec[k] for k in ['year','month','day','hour','minute','second','ms']] == list(cal)

@pytest.mark.parametrize("kw",[dict(vx=-123456.0),dict(n=1000.0),dict(T=1.0e10)])
def test_overflow(kw):
    vals = dict(bx=0.0,by=0.0,bz=5.0,vx=-400.0,vy=0.0,vz=0.0,n=5.0,T=ud.Tref)
    vals.update(kw)
    with pytest.raises(ULFFormatError) as err:
        imfWriter.fmtRecord((2000,1,1,0,0,0,0),**vals)
    assert list(kw.keys())[0] in str(err.value)

def test_parse_bad():
    with pytest.raises(ULFFormatError):
        imfWriter.parseRecord("2000 01 01")
    bad = "2000 01 01 06 00 00 000     0.0     0.0     x.0  -400.0     0.0     0.0   5.000   116173.91"
    with pytest.raises(ULFFormatError):
        imfWriter.parseRecord(bad)

@pytest.fixture
def series():
    grid = ult.genTimeGrid(1,60)
    dn = 0.5*np.sin(grid.t/600.0)
    state = swState.buildState(dn,5.0,ud.Tref)
    return grid,state

def test_writeIMF(tmp_path,series):
    grid,state = series
    fOut = str(tmp_path/"imf.txt")
    nRec = imfWriter.writeIMF(fOut,grid,state)
    assert nRec == grid.npts == 61
    with open(fOut) as f:
        lines = f.read().splitlines()
    assert len(lines) == 61
    recs = imfWriter.readIMF(fOut)
    assert np.allclose([r['n'] for r in recs],state.n,atol=0.0005)
    assert recs[-1]['hour'] == 1 and recs[-1]['minute'] == 0

def test_writeIMF_makes_dir(tmp_path,series):
    grid,state = series
    fOut = str(tmp_path/"sub"/"dir"/"imf.txt")
    imfWriter.writeIMF(fOut,grid,state)
    assert os.path.exists(fOut)

def test_writeIMF_unwritable(tmp_path,series):
    grid,state = series
    #Parent "directory" is a regular file
    blocker = tmp_path/"blocker"
    blocker.write_text("")
    fOut = str(blocker/"imf.txt")
    with pytest.raises(ULFWriteError) as err:
        imfWriter.writeIMF(fOut,grid,state)
    assert isinstance(err.value,OSError)
    assert err.value.filename == fOut

def test_writeIMF_format_error_no_file(tmp_path):
    grid = ult.genTimeGrid(1,600)
    state = swState.buildState(np.zeros(grid.npts),5.0,ud.Tref,vx=-1.0e6)
    fOut = tmp_path/"imf.txt"
    with pytest.raises(ULFFormatError):
        imfWriter.writeIMF(str(fOut),grid,state)
    assert not fOut.exists()

def test_writeIMF_length_mismatch(tmp_path,series):
    grid,_ = series
    state = swState.buildState(np.zeros(5),5.0,ud.Tref)
    with pytest.raises(ULFFormatError):
        imfWriter.writeIMF(str(tmp_path/"imf.txt"),grid,state)
