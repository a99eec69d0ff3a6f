#!/usr/bin/env python
'''#############################################################################
Generates an idealized solar wind IMF file driven by a single ULF wave packet.

Density is perturbed by a Gaussian-enveloped wave (single tone or random-phase
band of tones) centered 6 hours into the run, temperature moves opposite to
keep n*T fixed, and B/V are held constant.

Edit the table picks below to choose the run, there are no command line
options.
#############################################################################'''

# imports (std lib)
import sys
import logging
# imports (3rd party)
import matplotlib
matplotlib.use('Agg')
# imports (local)
from ulfpy.ulfErrors import ULFError
from ulfpy.solarWind import ulfConfig
from ulfpy.solarWind.ulfWind import runULFWind

# module-based configurations
logging.basicConfig(level=logging.INFO,format='%(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

#Indices into ulfConfig.AMPFRACS, FREQS, NWAVES, BWFRACS
iAmp  = 2 # 0.2*n0
iFreq = 2 # 3 mHz
iDur  = 2 # 6 wave periods
iBw   = 0 # single tone
seed  = 1234
doPlot = True

def main():
    try:
        cfg = ulfConfig.ULFConfig.fromTable(iAmp,iFreq,iDur,iBw,seed=seed)
        fOut = runULFWind(cfg,doPlot=doPlot)
    except ULFError as e:
        logger.error(e)
        return 1
    print("Wrote %s"%(fOut))
    return 0

if __name__ == "__main__":
    sys.exit(main())
