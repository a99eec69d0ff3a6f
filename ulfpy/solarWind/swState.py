import logging
import numpy as np
from dataclasses import dataclass

from ulfpy.ulfErrors import ULFConfigError, ULFNumericalError

logger = logging.getLogger(__name__)

@dataclass(frozen=True,eq=False)
class SWState:
	""" Solar wind plasma and field per sample
		n [#/cc], T [K], B [nT], V [km/s]
	"""
	n: np.ndarray
	T: np.ndarray
	bx: np.ndarray
	by: np.ndarray
	bz: np.ndarray
	vx: np.ndarray
	vy: np.ndarray
	vz: np.ndarray

	@property
	def npts(self):
		return len(self.n)

	def pressure(self):
		""" n*T, constant for a pressure balanced perturbation """
		return self.n*self.T

def _fillSeries(name,val,Nt):
	#Scalars become constant series, arrays must already have one value per sample
	val = np.asarray(val,dtype=float)
	if (val.ndim == 0):
		return np.full(Nt,float(val))
	if (val.shape != (Nt,)):
		raise ULFConfigError(name,"expected scalar or %d samples, got shape %s"%(Nt,val.shape))
	return val.copy()

def buildState(dn,n0,Tref,bx=0.0,by=0.0,bz=5.0,vx=-400.0,vy=0.0,vz=0.0):
	"""
	Background density n0 plus perturbation dn, with temperature chosen so that
	n*T = n0*Tref at every sample:
		n = n0 + dn
		T = Tref*(1 - dn/n)
	"""
	dn = np.asarray(dn,dtype=float)
	Nt = len(dn)

	n = n0 + dn
	if np.any(~(n > 0)):
		iBad = int(np.argmax(~(n > 0)))
		raise ULFConfigError('ampFrac',"density %g at sample %d is not positive, reduce the amplitude"%(n[iBad],iBad))

	T = Tref*(1.0 - dn/n)
	if not np.all(np.isfinite(T)):
		raise ULFNumericalError("Non-finite temperature at %d samples"%(np.count_nonzero(~np.isfinite(T))))

	logger.debug("Density range [%.3f,%.3f], temperature range [%.1f,%.1f]"%(n.min(),n.max(),T.min(),T.max()))
	return SWState(n=n,T=T,
		bx=_fillSeries('bx',bx,Nt),by=_fillSeries('by',by,Nt),bz=_fillSeries('bz',bz,Nt),
		vx=_fillSeries('vx',vx,Nt),vy=_fillSeries('vy',vy,Nt),vz=_fillSeries('vz',vz,Nt))
