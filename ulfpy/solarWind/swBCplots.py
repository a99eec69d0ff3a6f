"""
Quicklook plots of a synthetic ULF solar wind series.
Not needed to produce the IMF file, see ulfWind.runULFWind.
"""
import matplotlib.pyplot as plt
import matplotlib.gridspec as gridspec
from matplotlib import dates

utfmt = '%H:%M \n%Y-%m-%d'

def BasicPlot(ax,x,y,yLabel,color='b',Xlabel=True):
    """
    Mostly a wrapper for ax.plot(...) with datetime x-axis handling
    """
    ax.plot(x,y,color=color)
    ax.xaxis.set_major_formatter(dates.DateFormatter(utfmt))
    ax.set_ylabel(yLabel,fontsize='small')
    if Xlabel:
        ax.set_xlabel('UT')
    else:
        plt.setp(ax.get_xticklabels(),visible=False)

def ulfPlot(grid,state,dn,fOut,title=None):
    """
    Three stacked panels sharing the time axis: density, temperature and the
    density perturbation. Saved to fOut.
    """
    ut = grid.ut
    fig = plt.figure(figsize=(10,8))
    gs = gridspec.GridSpec(3,1,hspace=0.0)

    ax1 = fig.add_subplot(gs[0,0])
    ax2 = fig.add_subplot(gs[1,0],sharex=ax1)
    ax3 = fig.add_subplot(gs[2,0],sharex=ax1)

    BasicPlot(ax1,ut,state.n,r'n [$\mathrm{1/cm^3}$]',Xlabel=False)
    BasicPlot(ax2,ut,state.T*1.0e-3,r'T [$\mathrm{kK}$]',color='r',Xlabel=False)
    BasicPlot(ax3,ut,dn,r'dn [$\mathrm{1/cm^3}$]',color='k')

    # Alternate vertical axes
    ax2.yaxis.set_ticks_position('right')
    ax2.yaxis.set_label_position('right')

    if title is not None:
        ax1.set_title(title)
    fig.savefig(fOut)
    plt.close(fig)
    return fOut
