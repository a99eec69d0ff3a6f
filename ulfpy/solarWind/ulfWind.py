"""
Synthetic ULF wave solar wind run: time grid -> density perturbation ->
pressure balanced plasma state -> IMF file.
"""
import logging
import os
import pprint

import ulfpy.udefs as ud
import ulfpy.ulfTools as ult
from ulfpy.solarWind import waveSynth, swState, imfWriter

logger = logging.getLogger(__name__)

def genULFWind(cfg,rng=None):
	"""
	Compute the series for cfg without touching the disk
	Returns (grid, dn, state)
	rng overrides the generator seeded from cfg.seed
	"""
	grid = ult.genTimeGrid(cfg.simHours,cfg.dtSec,epoch=cfg.epoch)
	if rng is None:
		rng = waveSynth.getRNG(cfg.seed)

	dn = waveSynth.synthPerturbation(grid.t,cfg.wave,cfg.n0,cfg.tsSec,rng=rng)
	state = swState.buildState(dn,cfg.n0,ud.Tref,
		bx=cfg.bx,by=cfg.by,bz=cfg.bz,vx=cfg.vx,vy=cfg.vy,vz=cfg.vz)
	return grid,dn,state

def runULFWind(cfg,rng=None,doPlot=False):
	""" Generate and write the IMF file for cfg, returns the path written """
	logger.info("ULF run configuration:\n%s"%(pprint.pformat(cfg.asdict())))
	grid,dn,state = genULFWind(cfg,rng=rng)

	fOut = cfg.outPath()
	imfWriter.writeIMF(fOut,grid,state)
	logger.info("\tSamples: %d, dt = %g s"%(grid.npts,grid.dt))
	logger.info("\tDensity: [%.3f,%.3f] /cc"%(state.n.min(),state.n.max()))
	logger.info("\tTemperature: [%.1f,%.1f] K"%(state.T.min(),state.T.max()))

	if doPlot:
		#Keep matplotlib out of runs that don't need it
		from ulfpy.solarWind import swBCplots
		fPlot = os.path.splitext(fOut)[0]+'.png'
		swBCplots.ulfPlot(grid,state,dn,fPlot,title=fOut)
		logger.info("Saved quicklook plot to %s"%(fPlot))
	return fOut
