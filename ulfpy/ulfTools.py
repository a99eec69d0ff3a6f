import numpy as np
import datetime
import logging
from dataclasses import dataclass

from ulfpy.ulfErrors import ULFConfigError

logger = logging.getLogger(__name__)

#Fixed start time used to label samples, has no physical meaning
EPOCH = datetime.datetime(2000,1,1,0,0,0)

@dataclass(frozen=True,eq=False)
class TimeGrid:
	""" Uniform sample times [s] measured from epoch
		t[0] = 0, t[i] = i*dt
	"""
	t: np.ndarray
	dt: float
	epoch: datetime.datetime = EPOCH

	@property
	def npts(self):
		return len(self.t)

	@property
	def ut(self):
		""" Datetime of each sample, whole seconds only """
		#i*dt can land just under a whole second, e.g. 90*0.7 = 62.99999999999999
		secs = np.floor(self.t + 1.0e-9*self.dt).astype(int)
		return [self.epoch + datetime.timedelta(seconds=int(s)) for s in secs]

def numPoints(simSec,dt):
	"""
	Number of samples spanning [0,simSec] with spacing dt
	Rounds down then adds the starting point, i.e. floor(simSec/dt)+1
	If dt doesn't divide simSec the last sample lands before simSec
	"""
	#Tolerance keeps e.g. 43200/10 from flooring to 4319.999...
	return int(np.floor(simSec/dt*(1.0+1.0e-12))) + 1

def genTimeGrid(simHours,dtSec,epoch=EPOCH):
	""" Build the sample grid for a run of simHours [hr] at dtSec [s] resolution """
	if not (simHours > 0):
		raise ULFConfigError('simHours',"simulation length must be > 0 hours, got %s"%(simHours))
	if not (dtSec > 0):
		raise ULFConfigError('dtSec',"resolution must be > 0 seconds, got %s"%(dtSec))

	simSec = simHours*3600.0
	Nt = numPoints(simSec,dtSec)
	if (Nt < 2):
		raise ULFConfigError('dtSec',"resolution %s s leaves no interval in %s hours"%(dtSec,simHours))

	t = dtSec*np.arange(Nt,dtype=float)
	if not np.isclose(t[-1],simSec):
		logger.warning("dt=%g s does not divide %g s, last sample at %g s"%(dtSec,simSec,t[-1]))
	logger.debug("Time grid: %d samples, dt = %g s"%(Nt,dtSec))
	return TimeGrid(t=t,dt=float(dtSec),epoch=epoch)

def calFields(grid):
	"""
	Calendar decomposition of each sample
	Returns integer array (npts,7): year, month, day, hour, minute, second, millisecond
	Millisecond is always 0
	"""
	cal = np.zeros((grid.npts,7),dtype=int)
	for n,ut in enumerate(grid.ut):
		cal[n,:] = [ut.year,ut.month,ut.day,ut.hour,ut.minute,ut.second,0]
	return cal
