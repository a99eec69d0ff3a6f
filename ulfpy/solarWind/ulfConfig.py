# Structures that specify a synthetic ULF wave run. Pick a combination from the
# candidate tables below and hand the ULFConfig to ulfWind.genULFWind
from dataclasses import dataclass
from dataclasses import asdict as dc_asdict
from typing import Optional
import datetime
import logging

from ulfpy.ulfErrors import ULFConfigError
from ulfpy.ulfTools import EPOCH

logger = logging.getLogger(__name__)

#------
# Candidate values, a run uses one entry from each
#------
AMPFRACS = (0.05, 0.1, 0.2, 0.3)        # Peak dn as a fraction of background density
FREQS    = (0.001, 0.002, 0.003, 0.005)  # Center frequency [Hz]
NWAVES   = (2, 4, 6, 8)                  # Packet duration in wave periods
BWFRACS  = (0.0, 0.05, 0.1, 0.2)         # Half-bandwidth as fraction of center frequency, 0 = single tone

#Default picks: 20% amplitude, 3 mHz, 6 wavelengths, single tone
DEFPICK = (2, 2, 2, 0)

def _checkPositive(name, val):
	if not (val > 0):
		raise ULFConfigError(name, "must be > 0, got %s"%(val))

#------
# Actual classes/structures
#------
@dataclass(frozen=True)
class WaveParams:
	""" Defines the wave packet
		tau = nWaves/freq is the width of the Gaussian envelope
	"""
	ampFrac: float  # Peak perturbation / background density
	freq: float     # Center frequency [Hz]
	nWaves: float   # Duration in wave periods
	bwFrac: float = 0.0  # Fractional half-bandwidth, 0 for monochromatic

	def __post_init__(self):
		_checkPositive('ampFrac', self.ampFrac)
		if (self.ampFrac >= 1):
			raise ULFConfigError('ampFrac', "must be < 1 to keep density positive, got %s"%(self.ampFrac))
		_checkPositive('freq', self.freq)
		_checkPositive('nWaves', self.nWaves)
		if not (self.bwFrac >= 0):
			raise ULFConfigError('bwFrac', "must be >= 0, got %s"%(self.bwFrac))

	@property
	def tau(self):
		return self.nWaves/self.freq

	@property
	def isMono(self):
		return self.bwFrac == 0

def imfFileName(wave):
	""" Output file name encoding the wave parameters """
	return "ULF_A%.2f_f%.1fmHz_D%d_BW%.2f.txt"%(wave.ampFrac, wave.freq*1.0e+3, wave.nWaves, wave.bwFrac)

@dataclass(frozen=True)
class ULFConfig:
	"""
	Everything needed for one synthetic solar wind run

	Units: hours for simHours, seconds for dtSec/tsSec, #/cc for n0,
	nT for the field and km/s for the velocity.
	B and V components may be scalars or per-sample arrays.
	"""
	wave: WaveParams
	simHours: float = 12.0
	dtSec: float = 10.0
	tsSec: float = 6*3600.0  # Packet center
	n0: float = 5.0
	bx: float = 0.0
	by: float = 0.0
	bz: float = 5.0
	vx: float = -400.0
	vy: float = 0.0
	vz: float = 0.0
	seed: Optional[int] = None  # Seeds the broadband phases, None for fresh entropy
	epoch: datetime.datetime = EPOCH
	fOut: Optional[str] = None

	def __post_init__(self):
		if not isinstance(self.wave, WaveParams):
			raise ULFConfigError('wave', "expected WaveParams, got %s"%(type(self.wave).__name__))
		_checkPositive('simHours', self.simHours)
		_checkPositive('dtSec', self.dtSec)
		_checkPositive('n0', self.n0)
		if not (0 <= self.tsSec <= self.simHours*3600.0):
			#Still valid, only the tail of the packet falls inside the run
			logger.warning("Packet center %g s lies outside the %g hr run"%(self.tsSec,self.simHours))

	@classmethod
	def fromTable(cls, iAmp=DEFPICK[0], iFreq=DEFPICK[1], iDur=DEFPICK[2], iBw=DEFPICK[3], **kwargs):
		""" Build a config from indices into the candidate tables, remaining fields via kwargs """
		picks = {}
		for name,table,i in [('ampFrac',AMPFRACS,iAmp),('freq',FREQS,iFreq),('nWaves',NWAVES,iDur),('bwFrac',BWFRACS,iBw)]:
			try:
				picks[name] = table[i]
			except IndexError:
				raise ULFConfigError(name, "index %d outside candidate table %s"%(i,table)) from None
		return cls(wave=WaveParams(**picks), **kwargs)

	def outPath(self):
		if self.fOut is None:
			return imfFileName(self.wave)
		return self.fOut

	def asdict(self):
		return dc_asdict(self)
